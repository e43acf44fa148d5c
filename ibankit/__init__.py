"""ibankit: IBAN, BBAN and BIC validation.

    >>> from ibankit import is_valid_iban, compose_iban
    >>> is_valid_iban("NL91ABNA0417164300")
    True
    >>> compose_iban("NL", "ABNA0417164300")
    'NL91ABNA0417164300'
"""

from ibankit.checksum.mod97 import (
    generate_check_digits as generate_check_digits,
)
from ibankit.checksum.mod97 import (
    mod97 as mod97,
)
from ibankit.checksum.mod97 import (
    remap_letters as remap_letters,
)
from ibankit.checksum.mod97 import (
    verify_check_digits as verify_check_digits,
)
from ibankit.checksum.national import (
    BbanAlgorithm as BbanAlgorithm,
)
from ibankit.checksum.national import (
    BbanValidator as BbanValidator,
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
    RegistryError as RegistryError,
)
from ibankit.core.result import (
    Err as Err,
)
from ibankit.core.result import (
    Ok as Ok,
)
from ibankit.registry.registry import (
    CountryRegistry as CountryRegistry,
)
from ibankit.registry.registry import (
    default_registry as default_registry,
)
from ibankit.registry.spec import (
    CountrySpec as CountrySpec,
)
from ibankit.registry.spec import (
    CountrySpecView as CountrySpecView,
)
from ibankit.validation.bic import (
    BicParts as BicParts,
)
from ibankit.validation.bic import (
    BicValidation as BicValidation,
)
from ibankit.validation.bic import (
    extract_bic as extract_bic,
)
from ibankit.validation.bic import (
    is_valid_bic as is_valid_bic,
)
from ibankit.validation.bic import (
    validate_bic as validate_bic,
)
from ibankit.validation.extract import (
    IbanParts as IbanParts,
)
from ibankit.validation.extract import (
    extract_iban as extract_iban,
)
from ibankit.validation.formatting import (
    electronic_format as electronic_format,
)
from ibankit.validation.formatting import (
    friendly_format as friendly_format,
)
from ibankit.validation.iban import (
    IbanValidation as IbanValidation,
)
from ibankit.validation.iban import (
    compose_iban as compose_iban,
)
from ibankit.validation.iban import (
    country_specifications as country_specifications,
)
from ibankit.validation.iban import (
    is_qr_iban as is_qr_iban,
)
from ibankit.validation.iban import (
    is_sepa_country as is_sepa_country,
)
from ibankit.validation.iban import (
    is_valid_bban as is_valid_bban,
)
from ibankit.validation.iban import (
    is_valid_iban as is_valid_iban,
)
from ibankit.validation.iban import (
    register_bban_validator as register_bban_validator,
)
from ibankit.validation.iban import (
    validate_iban as validate_iban,
)
from ibankit.validation.identifiers import (
    Bic as Bic,
)
from ibankit.validation.identifiers import (
    Iban as Iban,
)
