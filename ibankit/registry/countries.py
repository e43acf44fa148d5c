"""The built-in country specification table.

Every ISO 3166 code known to the IBAN registry appears here, most without a
structural rule. XK (Kosovo) is provisional. The French overseas
territories (BL, GF, GP, MF, MQ, NC, PF, PM, RE, TF, WF, YT) reuse the
metropolitan French pattern. Offsets use the registry's "start-end"
notation, both ends inclusive.
"""

from __future__ import annotations

from ibankit.checksum.national import BbanAlgorithm
from ibankit.core.result import unwrap
from ibankit.core.types import FrozenMap, IdentifierRange
from ibankit.registry.spec import CountrySpec


def _range(raw: str | None) -> IdentifierRange | None:
    return None if raw is None else unwrap(IdentifierRange.parse(raw))


def _spec(
    code: str,
    length: int,
    pattern: str,
    *,
    algorithm: BbanAlgorithm | None = None,
    registry: bool = False,
    sepa: bool = False,
    bank: str | None = None,
    branch: str | None = None,
    account: str | None = None,
) -> CountrySpec:
    return CountrySpec(
        code=code,
        length=length,
        bban_pattern=pattern,
        algorithm=algorithm,
        iban_registry=registry,
        sepa=sepa,
        bank_identifier=_range(bank),
        branch_identifier=_range(branch),
        account_identifier=_range(account),
    )


_STRUCTURED: tuple[CountrySpec, ...] = (
    _spec("AD", 24, r"^[0-9]{8}[A-Z0-9]{12}$",
          registry=True, sepa=True, bank="0-3", branch="4-7", account="8-24"),
    _spec("AE", 23, r"^[0-9]{3}[0-9]{16}$", registry=True, bank="0-2", account="7-23"),
    _spec("AL", 28, r"^[0-9]{8}[A-Z0-9]{16}$",
          registry=True, bank="0-2", branch="3-7", account="12-28"),
    _spec("AO", 25, r"^[0-9]{21}$"),
    _spec("AT", 20, r"^[0-9]{16}$", registry=True, sepa=True, bank="0-4"),
    _spec("AX", 18, r"^[0-9]{14}$", registry=True),
    _spec("AZ", 28, r"^[A-Z]{4}[A-Z0-9]{20}$", registry=True, bank="0-3", account="4-28"),
    _spec("BA", 20, r"^[0-9]{16}$",
          algorithm=BbanAlgorithm.MOD97, registry=True, bank="0-2", branch="3-5"),
    _spec("BE", 16, r"^[0-9]{12}$",
          algorithm=BbanAlgorithm.BELGIUM, registry=True, sepa=True, bank="0-2", account="0-16"),
    _spec("BF", 28, r"^[A-Z0-9]{2}[0-9]{22}$"),
    _spec("BG", 22, r"^[A-Z]{4}[0-9]{6}[A-Z0-9]{8}$",
          registry=True, sepa=True, bank="0-3", branch="4-7"),
    _spec("BH", 22, r"^[A-Z]{4}[A-Z0-9]{14}$", registry=True, bank="0-3", account="8-22"),
    _spec("BI", 27, r"^[0-9]{23}$", bank="0-4", branch="5-9", account="14-27"),
    _spec("BJ", 28, r"^[A-Z0-9]{2}[0-9]{22}$"),
    _spec("BL", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$"),
    _spec("BR", 29, r"^[0-9]{23}[A-Z]{1}[A-Z0-9]{1}$",
          registry=True, bank="0-7", branch="8-12", account="17-29"),
    _spec("BY", 28, r"^[A-Z]{4}[0-9]{4}[A-Z0-9]{16}$", registry=True, bank="0-3"),
    _spec("CF", 27, r"^[0-9]{23}$"),
    _spec("CG", 27, r"^[0-9]{23}$"),
    _spec("CH", 21, r"^[0-9]{5}[A-Z0-9]{12}$", registry=True, sepa=True, bank="0-4"),
    _spec("CI", 28, r"^[A-Z]{1}[0-9]{23}$"),
    _spec("CM", 27, r"^[0-9]{23}$"),
    _spec("CR", 22, r"^[0-9]{18}$", registry=True, bank="0-3", account="8-22"),
    _spec("CV", 25, r"^[0-9]{21}$"),
    _spec("CY", 28, r"^[0-9]{8}[A-Z0-9]{16}$",
          registry=True, sepa=True, bank="0-2", branch="3-7", account="12-28"),
    _spec("CZ", 24, r"^[0-9]{20}$",
          algorithm=BbanAlgorithm.CZECH_SLOVAK, registry=True, sepa=True, bank="0-3"),
    _spec("DE", 22, r"^[0-9]{18}$", registry=True, sepa=True, bank="0-7", account="13-22"),
    _spec("DJ", 27, r"^[0-9]{23}$", bank="0-4", branch="5-9", account="14-27"),
    _spec("DK", 18, r"^[0-9]{14}$", registry=True, sepa=True, bank="0-3", account="4-18"),
    _spec("DO", 28, r"^[A-Z]{4}[0-9]{20}$", registry=True, bank="0-3", account="8-28"),
    _spec("DZ", 26, r"^[0-9]{22}$"),
    _spec("EE", 20, r"^[0-9]{16}$",
          algorithm=BbanAlgorithm.ESTONIA, registry=True, sepa=True, bank="0-1", account="8-20"),
    _spec("EG", 29, r"^[0-9]{25}$", registry=True, bank="0-3", branch="4-7", account="17-29"),
    _spec("ES", 24, r"^[0-9]{20}$",
          algorithm=BbanAlgorithm.SPAIN, registry=True, sepa=True,
          bank="0-3", branch="4-7", account="14-24"),
    _spec("FI", 18, r"^[0-9]{14}$", registry=True, sepa=True, bank="0-2", account="0-0"),
    _spec("FK", 18, r"^[A-Z]{2}[0-9]{12}$", bank="0-1", account="6-18"),
    _spec("FO", 18, r"^[0-9]{14}$", registry=True, bank="0-3", account="4-18"),
    _spec("FR", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$",
          algorithm=BbanAlgorithm.FRANCE, registry=True, sepa=True,
          bank="0-4", branch="5-9", account="14-24"),
    _spec("GA", 27, r"^[0-9]{23}$"),
    _spec("GB", 22, r"^[A-Z]{4}[0-9]{14}$", registry=True, sepa=True, bank="0-3", branch="4-9"),
    _spec("GE", 22, r"^[A-Z0-9]{2}[0-9]{16}$", registry=True, bank="0-1", account="6-22"),
    _spec("GF", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("GI", 23, r"^[A-Z]{4}[A-Z0-9]{15}$",
          registry=True, sepa=True, bank="0-3", account="8-23"),
    _spec("GL", 18, r"^[0-9]{14}$", registry=True, bank="0-3", account="4-18"),
    _spec("GP", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("GQ", 27, r"^[0-9]{23}$"),
    _spec("GR", 27, r"^[0-9]{7}[A-Z0-9]{16}$",
          registry=True, sepa=True, bank="0-2", branch="3-6", account="7-27"),
    _spec("GT", 28, r"^[A-Z0-9]{24}$", registry=True, bank="0-3", account="8-28"),
    _spec("GW", 25, r"^[A-Z]{2}[0-9]{19}$"),
    _spec("HN", 28, r"^[A-Z]{4}[0-9]{20}$"),
    _spec("HR", 21, r"^[0-9]{17}$",
          algorithm=BbanAlgorithm.CROATIA, registry=True, sepa=True, bank="0-6"),
    _spec("HU", 28, r"^[0-9]{24}$",
          algorithm=BbanAlgorithm.HUNGARY, registry=True, sepa=True, bank="0-2", branch="3-6"),
    _spec("IE", 22, r"^[A-Z0-9]{4}[0-9]{14}$", registry=True, sepa=True, bank="0-3", branch="4-9"),
    _spec("IL", 23, r"^[0-9]{19}$", registry=True, bank="0-2", branch="3-5"),
    _spec("IQ", 23, r"^[A-Z]{4}[0-9]{15}$",
          registry=True, bank="0-3", branch="4-6", account="11-23"),
    _spec("IR", 26, r"^[0-9]{22}$"),
    _spec("IS", 26, r"^[0-9]{22}$", registry=True, sepa=True, bank="0-1", branch="2-3"),
    _spec("IT", 27, r"^[A-Z]{1}[0-9]{10}[A-Z0-9]{12}$",
          registry=True, sepa=True, bank="1-5", branch="6-10", account="4-27"),
    _spec("JO", 30, r"^[A-Z]{4}[0-9]{4}[A-Z0-9]{18}$", registry=True, bank="4-7", branch="4-7"),
    _spec("KM", 27, r"^[0-9]{23}$"),
    _spec("KW", 30, r"^[A-Z]{4}[A-Z0-9]{22}$", registry=True, bank="0-3", account="20-30"),
    _spec("KZ", 20, r"^[0-9]{3}[A-Z0-9]{13}$", registry=True, bank="0-2", account="0-20"),
    _spec("LB", 28, r"^[0-9]{4}[A-Z0-9]{20}$", registry=True, bank="0-3", account="14-28"),
    _spec("LC", 32, r"^[A-Z]{4}[A-Z0-9]{24}$", registry=True, bank="0-3", account="8-32"),
    _spec("LI", 21, r"^[0-9]{5}[A-Z0-9]{12}$", registry=True, sepa=True, bank="0-4"),
    _spec("LT", 20, r"^[0-9]{16}$", registry=True, sepa=True, bank="0-4"),
    _spec("LU", 20, r"^[0-9]{3}[A-Z0-9]{13}$", registry=True, sepa=True, bank="0-2"),
    _spec("LV", 21, r"^[A-Z]{4}[A-Z0-9]{13}$",
          registry=True, sepa=True, bank="0-3", account="0-21"),
    _spec("LY", 25, r"^[0-9]{21}$", registry=True, bank="0-2", branch="3-5", account="10-25"),
    _spec("MA", 28, r"^[0-9]{24}$"),
    _spec("MC", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$",
          algorithm=BbanAlgorithm.FRANCE, registry=True, sepa=True, bank="0-4", branch="5-9"),
    _spec("MD", 24, r"^[A-Z0-9]{2}[A-Z0-9]{18}$", registry=True, bank="0-1", account="6-24"),
    _spec("ME", 22, r"^[0-9]{18}$",
          algorithm=BbanAlgorithm.MOD97, registry=True, bank="0-2", account="4-22"),
    _spec("MF", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("MG", 27, r"^[0-9]{23}$"),
    _spec("MK", 19, r"^[0-9]{3}[A-Z0-9]{10}[0-9]{2}$",
          algorithm=BbanAlgorithm.MOD97, registry=True, bank="0-2"),
    _spec("ML", 28, r"^[A-Z0-9]{2}[0-9]{22}$"),
    _spec("MN", 20, r"^[0-9]{16}$", registry=True, bank="0-3", account="8-20"),
    _spec("MQ", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("MR", 27, r"^[0-9]{23}$", registry=True, bank="0-4", branch="5-9", account="4-27"),
    _spec("MT", 31, r"^[A-Z]{4}[0-9]{5}[A-Z0-9]{18}$",
          registry=True, sepa=True, bank="0-3", branch="4-8", account="15-31"),
    _spec("MU", 30, r"^[A-Z]{4}[0-9]{19}[A-Z]{3}$",
          registry=True, bank="0-5", branch="6-7", account="0-30"),
    _spec("MZ", 25, r"^[0-9]{21}$"),
    _spec("NC", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("NE", 28, r"^[A-Z]{2}[0-9]{22}$"),
    _spec("NI", 28, r"^[A-Z]{4}[0-9]{20}$", registry=True, bank="0-3", account="8-28"),
    _spec("NL", 18, r"^[A-Z]{4}[0-9]{10}$", registry=True, sepa=True, bank="0-3", account="8-18"),
    _spec("NO", 15, r"^[0-9]{11}$",
          algorithm=BbanAlgorithm.NORWAY, registry=True, sepa=True, bank="0-3", account="4-15"),
    _spec("OM", 23, r"^[0-9]{3}[A-Z0-9]{16}$", registry=True, bank="0-2"),
    _spec("PF", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("PK", 24, r"^[A-Z0-9]{4}[0-9]{16}$", registry=True, bank="0-3"),
    _spec("PL", 28, r"^[0-9]{24}$",
          algorithm=BbanAlgorithm.POLAND, registry=True, sepa=True, branch="0-7", account="2-28"),
    _spec("PM", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("PS", 29, r"^[A-Z0-9]{4}[0-9]{21}$", registry=True, bank="0-3", account="17-29"),
    _spec("PT", 25, r"^[0-9]{21}$",
          algorithm=BbanAlgorithm.MOD97, registry=True, sepa=True, bank="0-3"),
    _spec("QA", 29, r"^[A-Z]{4}[A-Z0-9]{21}$", registry=True, bank="0-3", account="8-29"),
    _spec("RE", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("RO", 24, r"^[A-Z]{4}[A-Z0-9]{16}$",
          registry=True, sepa=True, bank="0-3", account="0-24"),
    _spec("RS", 22, r"^[0-9]{18}$", algorithm=BbanAlgorithm.MOD97, registry=True, bank="0-2"),
    _spec("RU", 33, r"^[0-9]{14}[A-Z0-9]{15}$",
          registry=True, bank="0-8", branch="9-13", account="13-33"),
    _spec("SA", 24, r"^[0-9]{2}[A-Z0-9]{18}$", registry=True, bank="0-1", account="12-24"),
    _spec("SC", 31, r"^[A-Z]{4}[0-9]{20}[A-Z]{3}$",
          registry=True, bank="0-5", branch="6-7", account="12-28"),
    _spec("SD", 18, r"^[0-9]{14}$", registry=True, bank="0-1", account="6-18"),
    _spec("SE", 24, r"^[0-9]{20}$", registry=True, sepa=True, bank="0-2"),
    _spec("SI", 19, r"^[0-9]{15}$",
          algorithm=BbanAlgorithm.MOD97, registry=True, sepa=True,
          bank="0-1", branch="2-4", account="9-16"),
    _spec("SK", 24, r"^[0-9]{20}$",
          algorithm=BbanAlgorithm.CZECH_SLOVAK, registry=True, sepa=True),
    _spec("SM", 27, r"^[A-Z]{1}[0-9]{10}[A-Z0-9]{12}$", registry=True, sepa=True, branch="6-10"),
    _spec("SN", 28, r"^[A-Z]{2}[0-9]{22}$"),
    _spec("SO", 23, r"^[0-9]{19}$", registry=True, branch="4-6", account="11-23"),
    _spec("ST", 25, r"^[0-9]{21}$", registry=True, branch="4-7"),
    _spec("SV", 28, r"^[A-Z]{4}[0-9]{20}$", registry=True, account="8-28"),
    _spec("TD", 27, r"^[0-9]{23}$"),
    _spec("TF", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("TG", 28, r"^[A-Z]{2}[0-9]{22}$"),
    _spec("TL", 23, r"^[0-9]{19}$", registry=True, account="4-23"),
    _spec("TN", 24, r"^[0-9]{20}$", registry=True, branch="2-4", account="4-24"),
    _spec("TR", 26, r"^[0-9]{5}[A-Z0-9]{17}$", registry=True),
    _spec("UA", 29, r"^[0-9]{6}[A-Z0-9]{19}$", registry=True, account="15-29"),
    _spec("VA", 22, r"^[0-9]{18}$", registry=True, sepa=True, account="7-22"),
    _spec("VG", 24, r"^[A-Z0-9]{4}[0-9]{16}$", registry=True, account="8-24"),
    _spec("WF", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
    _spec("XK", 20, r"^[0-9]{16}$", registry=True, branch="2-3", account="4-20"),
    _spec("YT", 27, r"^[0-9]{10}[A-Z0-9]{11}[0-9]{2}$", registry=True),
)

# Known country codes without an IBAN structure.
_UNSTRUCTURED: tuple[str, ...] = (
    "AF", "AG", "AI", "AM", "AQ", "AR", "AS", "AU", "AW", "BB", "BD", "BM",
    "BN", "BO", "BQ", "BS", "BT", "BV", "BW", "BZ", "CA", "CC", "CD", "CK",
    "CL", "CN", "CO", "CU", "CW", "CX", "DM", "EC", "EH", "ER", "ET", "FJ",
    "FM", "GD", "GG", "GH", "GM", "GN", "GS", "GU", "GY", "HK", "HM", "HT",
    "ID", "IM", "IN", "IO", "JE", "JM", "JP", "KE", "KG", "KH", "KI", "KN",
    "KP", "KR", "KY", "LA", "LK", "LR", "LS", "MH", "MM", "MO", "MP", "MS",
    "MV", "MW", "MX", "MY", "NA", "NF", "NG", "NP", "NR", "NU", "NZ", "PA",
    "PE", "PG", "PH", "PN", "PR", "PW", "PY", "RW", "SB", "SG", "SH", "SJ",
    "SL", "SR", "SS", "SX", "SY", "SZ", "TC", "TH", "TJ", "TK", "TM", "TO",
    "TT", "TV", "TW", "TZ", "UG", "UM", "US", "UY", "UZ", "VC", "VE", "VI",
    "VN", "VU", "WS", "YE", "ZA", "ZM", "ZW",
)

COUNTRY_SPECS: FrozenMap[str, CountrySpec] = unwrap(FrozenMap.create(
    [(spec.code, spec) for spec in _STRUCTURED]
    + [(code, CountrySpec(code=code)) for code in _UNSTRUCTURED]
))
