"""Static IBAN country registry.

The table is built eagerly at import time and never mutated afterwards, so a
single `CountryRegistry` instance can be shared by any number of callers.
Every row is validated by `CountryProfile` (length == 4 + BBAN length).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from core.domain.models import CountryProfile

# code, name, length, BBAN description, BBAN pattern, example
_COUNTRY_ROWS: tuple[tuple[str, str, int, str, str, str], ...] = (
    ("AD", "Andorra", 24, "Bank(4) + Branch(4) + Account(12)", r"\d{4}\d{4}\d{12}", "AD1200012030200359100100"),
    ("AE", "UAE", 23, "Bank(3) + Account(16)", r"\d{3}\d{16}", "AE070331234567890123456"),
    ("AL", "Albania", 28, "Bank(3) + Branch(4) + Check(1) + Account(16)", r"\d{8}\d{16}", "AL47212110090000000235698741"),
    ("AT", "Austria", 20, "Bank(5) + Account(11)", r"\d{5}\d{11}", "AT611904300234573201"),
    ("AZ", "Azerbaijan", 28, "Bank(4) + Account(20)", r"[A-Z]{4}\d{20}", "AZ21NABZ00000000137010001944"),
    ("BA", "Bosnia and Herzegovina", 20, "Bank(3) + Branch(3) + Account(8) + Check(2)", r"\d{3}\d{3}\d{8}\d{2}", "BA391290079401028494"),
    ("BE", "Belgium", 16, "Bank(3) + Account(7) + Check(2)", r"\d{3}\d{7}\d{2}", "BE68539007547034"),
    ("BG", "Bulgaria", 22, "Bank(4) + Branch(4) + Account(2) + Account(8)", r"[A-Z]{4}\d{4}\d{2}\d{8}", "BG80BNBG96611020345678"),
    ("BH", "Bahrain", 22, "Bank(4) + Account(14)", r"[A-Z]{4}\d{14}", "BH67BMAG00001299123456"),
    ("BR", "Brazil", 29, "Bank(8) + Branch(5) + Account(10) + Check(1) + Owner(1)", r"\d{8}\d{5}\d{10}[A-Z]{1}[A-Z0-9]{1}", "BR9700360305000010009795493P1"),
    ("BY", "Belarus", 28, "Bank(4) + Balance(4) + Account(16)", r"\d{4}\d{4}\d{16}", "BY13NBRB3600900000002Z00AB00"),
    ("CH", "Switzerland", 21, "Bank(5) + Account(12)", r"\d{5}\d{12}", "CH9300762011623852957"),
    ("CR", "Costa Rica", 22, "Bank(4) + Account(14)", r"\d{4}\d{14}", "CR05015202001026284066"),
    ("CY", "Cyprus", 28, "Bank(3) + Branch(5) + Account(16)", r"\d{3}\d{5}\d{16}", "CY17002001280000001200527600"),
    ("CZ", "Czech Republic", 24, "Bank(4) + Account(6) + Account(10)", r"\d{4}\d{6}\d{10}", "CZ6508000000192000145399"),
    ("DE", "Germany", 22, "Bank(8) + Account(10)", r"\d{8}\d{10}", "DE89370400440532013000"),
    ("DK", "Denmark", 18, "Bank(4) + Account(9) + Check(1)", r"\d{4}\d{9}\d{1}", "DK5000400440116243"),
    ("DO", "Dominican Republic", 28, "Bank(4) + Account(20)", r"[A-Z]{4}\d{20}", "DO28BAGR00000001212453611324"),
    ("EE", "Estonia", 20, "Bank(2) + Branch(2) + Account(11) + Check(1)", r"\d{2}\d{2}\d{11}\d{1}", "EE382200221020145685"),
    ("EG", "Egypt", 29, "Bank(4) + Branch(4) + Account(17)", r"\d{4}\d{4}\d{17}", "EG380019000500000000263180002"),
    ("ES", "Spain", 24, "Bank(4) + Branch(4) + Check(1) + Check(1) + Account(10)", r"\d{4}\d{4}\d{1}\d{1}\d{10}", "ES9121000418450200051332"),
    ("FI", "Finland", 18, "Bank(3) + Account(11)", r"\d{3}\d{11}", "FI2112345600000785"),
    ("FO", "Faroe Islands", 18, "Bank(4) + Account(9) + Check(1)", r"\d{4}\d{9}\d{1}", "FO6264600001631634"),
    ("FR", "France", 27, "Bank(5) + Branch(5) + Account(11) + Check(2)", r"\d{5}\d{5}\d{11}\d{2}", "FR1420041010050500013M02606"),
    ("GB", "United Kingdom", 22, "Bank(4) + Branch(6) + Account(8)", r"[A-Z]{4}\d{6}\d{8}", "GB29NWBK60161331926819"),
    ("GE", "Georgia", 22, "Bank(2) + Account(16)", r"[A-Z]{2}\d{16}", "GE29NB0000000101904917"),
    ("GI", "Gibraltar", 23, "Bank(4) + Account(15)", r"[A-Z]{4}\d{15}", "GI75NWBK000000007099453"),
    ("GL", "Greenland", 18, "Bank(4) + Account(9) + Check(1)", r"\d{4}\d{9}\d{1}", "GL8964710001000206"),
    ("GR", "Greece", 27, "Bank(3) + Branch(4) + Account(16)", r"\d{3}\d{4}\d{16}", "GR1601101250000000012300695"),
    ("GT", "Guatemala", 28, "Bank(4) + Currency(2) + Account(2) + Account(16)", r"[A-Z]{4}\d{2}\d{2}\d{16}", "GT82TRAJ01020000001210029690"),
    ("HR", "Croatia", 21, "Bank(7) + Account(10)", r"\d{7}\d{10}", "HR1210010051863000160"),
    ("HU", "Hungary", 28, "Bank(3) + Branch(4) + Account(1) + Account(15) + Check(1)", r"\d{3}\d{4}\d{1}\d{15}\d{1}", "HU42117730161111101800000000"),
    ("IE", "Ireland", 22, "Bank(4) + Branch(6) + Account(8)", r"[A-Z]{4}\d{6}\d{8}", "IE29AIBK93115212345678"),
    ("IL", "Israel", 23, "Bank(3) + Branch(3) + Account(13)", r"\d{3}\d{3}\d{13}", "IL620108000000099999999"),
    ("IS", "Iceland", 26, "Bank(2) + Branch(2) + Account(2) + Account(6) + Account(10)", r"\d{2}\d{2}\d{2}\d{6}\d{10}", "IS140159260076545510730339"),
    ("IT", "Italy", 27, "Check(1) + Bank(5) + Branch(5) + Account(12)", r"[A-Z]{1}\d{5}\d{5}\d{12}", "IT60X0542811101000000123456"),
    ("JO", "Jordan", 30, "Bank(4) + Branch(4) + Account(18)", r"[A-Z]{4}\d{4}\d{18}", "JO94CBJO0010000000000131000302"),
    ("KW", "Kuwait", 30, "Bank(4) + Account(22)", r"[A-Z]{4}\d{22}", "KW81CBKU0000000000001234560101"),
    ("KZ", "Kazakhstan", 20, "Bank(3) + Account(13)", r"\d{3}\d{13}", "KZ86125KZT5004100100"),
    ("LB", "Lebanon", 28, "Bank(4) + Account(20)", r"\d{4}\d{20}", "LB62099900000001001901229114"),
    ("LC", "Saint Lucia", 32, "Bank(4) + Account(24)", r"[A-Z]{4}\d{24}", "LC55HEMM000100010012001200023015"),
    ("LI", "Liechtenstein", 21, "Bank(5) + Account(12)", r"\d{5}\d{12}", "LI21088100002324013AA"),
    ("LT", "Lithuania", 20, "Bank(5) + Account(11)", r"\d{5}\d{11}", "LT121000011101001000"),
    ("LU", "Luxembourg", 20, "Bank(3) + Account(13)", r"\d{3}\d{13}", "LU280019400644750000"),
    ("LV", "Latvia", 21, "Bank(4) + Account(13)", r"[A-Z]{4}\d{13}", "LV80BANK0000435195001"),
    ("MC", "Monaco", 27, "Bank(5) + Branch(5) + Account(11) + Check(2)", r"\d{5}\d{5}\d{11}\d{2}", "MC5811222000010123456789030"),
    ("MD", "Moldova", 24, "Bank(2) + Account(18)", r"[A-Z]{2}\d{18}", "MD24AG000225100013104168"),
    ("ME", "Montenegro", 22, "Bank(3) + Account(13) + Check(2)", r"\d{3}\d{13}\d{2}", "ME25505000012345678951"),
    ("MK", "North Macedonia", 19, "Bank(3) + Account(10) + Check(2)", r"\d{3}\d{10}\d{2}", "MK07250120000058984"),
    ("MR", "Mauritania", 27, "Bank(5) + Branch(5) + Account(11) + Check(2)", r"\d{5}\d{5}\d{11}\d{2}", "MR1300020001010000123456753"),
    ("MT", "Malta", 31, "Bank(4) + Branch(5) + Account(18)", r"[A-Z]{4}\d{5}\d{18}", "MT84MALT011000012345MTLCAST001S"),
    ("MU", "Mauritius", 30, "Bank(4) + Branch(2) + Account(2) + Account(12) + Reserved(3) + Currency(3)", r"[A-Z]{4}\d{2}\d{2}\d{12}\d{3}[A-Z]{3}", "MU17BOMM0101101030300200000MUR"),
    ("NL", "Netherlands", 18, "Bank(4) + Account(10)", r"[A-Z]{4}\d{10}", "NL91ABNA0417164300"),
    ("NO", "Norway", 15, "Bank(4) + Account(6) + Check(1)", r"\d{4}\d{6}\d{1}", "NO9386011117947"),
    ("PK", "Pakistan", 24, "Bank(4) + Account(16)", r"[A-Z]{4}\d{16}", "PK36SCBL0000001123456702"),
    ("PL", "Poland", 28, "Bank(3) + Branch(4) + Check(1) + Account(16)", r"\d{3}\d{4}\d{1}\d{16}", "PL61109010140000071219812874"),
    ("PS", "Palestine", 29, "Bank(4) + Account(21)", r"[A-Z]{4}\d{21}", "PS92PALS000000000400123456702"),
    ("PT", "Portugal", 25, "Bank(4) + Branch(4) + Account(11) + Check(2)", r"\d{4}\d{4}\d{11}\d{2}", "PT50000201231234567890154"),
    ("QA", "Qatar", 29, "Bank(4) + Account(21)", r"[A-Z]{4}\d{21}", "QA58DOHB00001234567890ABCDEFG"),
    ("RO", "Romania", 24, "Bank(4) + Account(16)", r"[A-Z]{4}\d{16}", "RO49AAAA1B31007593840000"),
    ("RS", "Serbia", 22, "Bank(3) + Account(13) + Check(2)", r"\d{3}\d{13}\d{2}", "RS35260005601001611379"),
    ("SA", "Saudi Arabia", 24, "Bank(2) + Account(18)", r"\d{2}\d{18}", "SA0380000000608010167519"),
    ("SE", "Sweden", 24, "Bank(3) + Account(16) + Check(1)", r"\d{3}\d{16}\d{1}", "SE4550000000058398257466"),
    ("SI", "Slovenia", 19, "Bank(2) + Branch(3) + Account(8) + Check(2)", r"\d{2}\d{3}\d{8}\d{2}", "SI56263300012039086"),
    ("SK", "Slovakia", 24, "Bank(4) + Account(6) + Account(10)", r"\d{4}\d{6}\d{10}", "SK3112000000198742637541"),
    ("SM", "San Marino", 27, "Check(1) + Bank(5) + Branch(5) + Account(12)", r"[A-Z]{1}\d{5}\d{5}\d{12}", "SM86U0322509800000000270100"),
    ("TN", "Tunisia", 24, "Bank(2) + Branch(3) + Account(13) + Check(2)", r"\d{2}\d{3}\d{13}\d{2}", "TN5910006035183598478831"),
    ("TR", "Turkey", 26, "Bank(5) + Reserved(1) + Account(16)", r"\d{5}\d{1}\d{16}", "TR330006100519786457841326"),
    ("UA", "Ukraine", 29, "Bank(6) + Account(19)", r"\d{6}\d{19}", "UA213996220000026007233566001"),
    ("VG", "British Virgin Islands", 24, "Bank(4) + Account(16)", r"[A-Z]{4}\d{16}", "VG96VPVG0000012345678901"),
    ("XK", "Kosovo", 20, "Bank(2) + Branch(2) + Account(10) + Check(2)", r"\d{2}\d{2}\d{10}\d{2}", "XK051212012345678906"),
)


class CountryRegistry:
    """Read-only lookup of country profiles."""

    def __init__(self, profiles: Iterable[CountryProfile]) -> None:
        table: dict[str, CountryProfile] = {}
        for profile in profiles:
            if profile.code in table:
                raise ValueError(f"Duplicate country profile: {profile.code}")
            table[profile.code] = profile
        self._profiles: Mapping[str, CountryProfile] = MappingProxyType(table)
        self._by_name: tuple[CountryProfile, ...] = tuple(
            sorted(table.values(), key=lambda p: (p.name.casefold(), p.code))
        )

    def lookup(self, code: str) -> CountryProfile | None:
        """Profile for `code` (case-insensitive), or None when not registered."""

        if not isinstance(code, str):
            return None
        return self._profiles.get(code.strip().upper())

    def list(self) -> list[CountryProfile]:
        """All profiles sorted by country name."""

        return list(self._by_name)

    def codes(self) -> list[str]:
        return sorted(self._profiles)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def __iter__(self) -> Iterator[CountryProfile]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._profiles)


def _build_profiles() -> list[CountryProfile]:
    return [
        CountryProfile(
            code=code,
            name=name,
            length=length,
            bban_description=description,
            bban_pattern=pattern,
            example=example,
        )
        for code, name, length, description, pattern, example in _COUNTRY_ROWS
    ]


DEFAULT_REGISTRY = CountryRegistry(_build_profiles())
