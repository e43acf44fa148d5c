"""ibankit.core: results, errors, types, configuration, serialization."""

from ibankit.core.config import (
    DEFAULT_OPTIONS as DEFAULT_OPTIONS,
)
from ibankit.core.config import (
    ValidationOptions as ValidationOptions,
)
from ibankit.core.errors import (
    BicErrorCode as BicErrorCode,
)
from ibankit.core.errors import (
    IbanErrorCode as IbanErrorCode,
)
from ibankit.core.errors import (
    IbankitError as IbankitError,
)
from ibankit.core.errors import (
    RegistryError as RegistryError,
)
from ibankit.core.result import (
    Err as Err,
)
from ibankit.core.result import (
    Ok as Ok,
)
from ibankit.core.result import (
    Result as Result,
)
from ibankit.core.result import (
    unwrap as unwrap,
)
from ibankit.core.serialization import (
    canonical_bytes as canonical_bytes,
)
from ibankit.core.serialization import (
    content_hash as content_hash,
)
from ibankit.core.types import (
    FrozenMap as FrozenMap,
)
from ibankit.core.types import (
    IdentifierRange as IdentifierRange,
)
