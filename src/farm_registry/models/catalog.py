"""Closed code tables shared by the normalizer, filters and display layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class CodeTable:
    """Ordered (code, Korean label) pairs for one enumeration."""

    name: str
    entries: tuple[tuple[str, str], ...]

    def __contains__(self, code: object) -> bool:
        return any(code == entry_code for entry_code, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def codes(self) -> tuple[str, ...]:
        return tuple(code for code, _ in self.entries)

    def label(self, code: str) -> str:
        """Return the label for ``code``; unknown codes come back unchanged."""
        for entry_code, entry_label in self.entries:
            if entry_code == code:
                return entry_label
        return code

    def as_dicts(self) -> list[dict[str, str]]:
        return [{"value": code, "label": label} for code, label in self.entries]


FARMING_TYPES = CodeTable(
    "farmingTypes",
    (
        ("waterPaddy", "수도작"),
        ("fieldFarming", "밭농사"),
        ("orchard", "과수원"),
        ("livestock", "축산업"),
        ("forageCrop", "사료작물"),
    ),
)

MAIN_CROP_CATEGORIES = CodeTable(
    "mainCropCategories",
    (
        ("foodCrops", "식량작물"),
        ("facilityHort", "시설원예"),
        ("fieldVeg", "노지채소"),
        ("fruits", "과수"),
        ("specialCrops", "특용작물"),
        ("flowers", "화훼"),
        ("livestock", "축산"),
    ),
)

CROP_DETAILS: dict[str, CodeTable] = {
    "foodCrops": CodeTable(
        "foodCrops",
        (
            ("rice", "벼"),
            ("barley", "보리"),
            ("wheat", "밀"),
            ("corn", "옥수수"),
            ("soybean", "콩"),
            ("potato", "감자"),
            ("sweetPotato", "고구마"),
        ),
    ),
    "facilityHort": CodeTable(
        "facilityHort",
        (
            ("tomato", "토마토"),
            ("strawberry", "딸기"),
            ("cucumber", "오이"),
            ("pepper", "고추"),
            ("watermelon", "수박"),
            ("melon", "멜론"),
        ),
    ),
    "fieldVeg": CodeTable(
        "fieldVeg",
        (
            ("cabbage", "배추"),
            ("radish", "무"),
            ("garlic", "마늘"),
            ("onion", "양파"),
            ("carrot", "당근"),
        ),
    ),
    "fruits": CodeTable(
        "fruits",
        (
            ("apple", "사과"),
            ("pear", "배"),
            ("grape", "포도"),
            ("peach", "복숭아"),
            ("citrus", "감귤"),
        ),
    ),
    "specialCrops": CodeTable(
        "specialCrops",
        (
            ("sesame", "참깨"),
            ("perilla", "들깨"),
            ("ginseng", "인삼"),
            ("medicinalHerbs", "약용작물"),
        ),
    ),
    "flowers": CodeTable(
        "flowers",
        (
            ("rose", "장미"),
            ("chrysanthemum", "국화"),
            ("lily", "백합"),
            ("orchid", "난"),
        ),
    ),
    "livestock": CodeTable(
        "livestock",
        (
            ("cattle", "한우"),
            ("pig", "돼지"),
            ("chicken", "닭"),
            ("duck", "오리"),
            ("goat", "염소"),
            ("dairy", "젖소"),
            ("other", "기타"),
        ),
    ),
}

# Older documents stored one flag per crop instead of category + details.
LEGACY_CROP_CATEGORIES: dict[str, tuple[str, str]] = {
    "rice": ("foodCrops", "rice"),
    "barley": ("foodCrops", "barley"),
    "soybean": ("foodCrops", "soybean"),
    "sweetPotato": ("foodCrops", "sweetPotato"),
    "sorghum": ("foodCrops", "sorghum"),
    "persimmon": ("fruits", "persimmon"),
    "pear": ("fruits", "pear"),
    "plum": ("fruits", "plum"),
    "hanwoo": ("livestock", "cattle"),
    "goat": ("livestock", "goat"),
}

EQUIPMENT_TYPES = CodeTable(
    "equipmentTypes",
    (
        ("tractor", "트랙터"),
        ("combine", "콤바인"),
        ("rice_transplanter", "이앙기"),
        ("transplanter", "이앙기"),
        ("forklift", "지게차"),
        ("excavator", "굴삭기"),
        ("skid_loader", "스키로더"),
        ("dryer", "건조기"),
        ("silo", "싸일론"),
        ("drone", "드론"),
        ("other", "기타"),
    ),
)

MANUFACTURERS = CodeTable(
    "manufacturers",
    (
        ("DAEDONG", "대동"),
        ("LS", "LS"),
        ("KUKJE", "국제"),
        ("TYM", "TYM"),
        ("BRANSON", "브랜슨"),
        ("DONGYANG", "동양"),
        ("ASIA", "아시아"),
        ("YANMAR", "얀마"),
        ("ISEKI", "이세키"),
        ("KUBOTA", "구보다"),
        ("JOHN_DEERE", "존디어"),
        ("NEW_HOLLAND", "뉴홀랜드"),
        ("MASSEY_FERGUSON", "매시퍼거슨"),
        ("HYUNDAI", "현대건설기계"),
        ("SAMSUNG", "삼성건설기계"),
        ("VOLVO", "볼보건설기계"),
        ("DAEWOO", "대우건설기계"),
        ("DOOSAN", "두산인프라코어"),
        ("BOBCAT", "밥캣"),
        ("CATERPILLAR", "캐터필러"),
        ("KOMATSU", "코마츠"),
        ("HITACHI", "히타치"),
        ("JCB", "JCB"),
        ("HEUNGSUNG", "흥성"),
        ("SEWOONG", "세웅"),
        ("BONSA", "본사"),
    ),
)

ATTACHMENT_TYPES = CodeTable(
    "attachmentTypes",
    (
        ("loader", "로더"),
        ("rotary", "로타리"),
        ("frontWheel", "전륜"),
        ("rearWheel", "후륜"),
    ),
)

_WHEEL_MANUFACTURERS = CodeTable(
    "wheel",
    (
        ("heungah", "흥아"),
        ("bkt", "BKT"),
        ("michelin", "미셀린"),
        ("india", "인도"),
        ("china", "중국"),
        ("other", "기타"),
    ),
)

ATTACHMENT_MANUFACTURERS: dict[str, CodeTable] = {
    "loader": CodeTable(
        "loader",
        (
            ("hanil", "한일"),
            ("taesung", "태성"),
            ("ansung", "안성"),
            ("heemang", "희망"),
            ("jangsu", "장수"),
            ("bonsa", "본사"),
            ("other", "기타"),
        ),
    ),
    "rotary": CodeTable(
        "rotary",
        (
            ("woongjin", "웅진"),
            ("samwon", "삼원"),
            ("weeken", "위켄"),
            ("youngjin", "영진"),
            ("agros", "아그로스"),
            ("chelli", "첼리"),
            ("jungang", "중앙"),
            ("folder", "폴더"),
            ("other", "기타"),
        ),
    ),
    "frontWheel": _WHEEL_MANUFACTURERS,
    "rearWheel": _WHEEL_MANUFACTURERS,
}

SALE_TYPES = CodeTable("saleTypes", (("new", "신규"), ("used", "중고")))

TRADE_TYPES = CodeTable("tradeTypes", (("sale", "판매희망"), ("purchase", "구매희망")))

SALE_STATUSES = CodeTable(
    "saleStatuses",
    (
        ("available", "거래가능"),
        ("reserved", "예약중"),
        ("completed", "거래완료"),
    ),
)

MAIL_OPTIONS = CodeTable("mailOptions", (("all", "전체"), ("yes", "가능"), ("no", "불가능")))

PROVINCE_NAME = "전라남도"

PROVINCE_CITIES: tuple[str, ...] = (
    "목포시",
    "여수시",
    "순천시",
    "나주시",
    "광양시",
    "담양군",
    "곡성군",
    "구례군",
    "고흥군",
    "보성군",
    "화순군",
    "장흥군",
    "강진군",
    "해남군",
    "영암군",
    "무안군",
    "함평군",
    "영광군",
    "장성군",
    "완도군",
    "진도군",
    "신안군",
)

CITY_TOWNSHIPS: dict[str, tuple[str, ...]] = {
    "목포시": (
        "용당1동", "용당2동", "연동", "산정동", "연산동", "원산동", "대성동", "목원동",
        "동명동", "삼학동", "만호동", "유달동", "죽교동", "북항동", "용해동", "이로동",
        "상동", "하당동", "신흥동", "삼향동", "옥암동", "부주동",
    ),
    "여수시": (
        "돌산읍", "소라면", "율촌면", "화양면", "남면", "화정면", "삼산면", "동문동",
        "한려동", "중앙동", "충무동", "광림동", "서강동", "대교동", "국동", "월호동",
        "여서동", "문수동", "미평동", "둔덕동", "만덕동", "쌍봉동", "시전동", "여천동",
        "주삼동", "삼일동", "묘도동",
    ),
    "순천시": (
        "승주읍", "해룡면", "서면", "황전면", "월등면", "주암면", "송광면", "외서면",
        "낙안면", "별량면", "상사면", "중앙동", "향동", "매곡동", "삼산동", "조곡동",
        "덕연동", "풍덕동", "남제동", "저전동", "장천동", "도사동", "왕조1동", "왕조2동",
    ),
    "나주시": (
        "남평읍", "세지면", "왕곡면", "반남면", "공산면", "동강면", "다시면", "문평면",
        "노안면", "금천면", "산포면", "다도면", "봉황면",
    ),
    "광양시": (
        "광양읍", "봉강면", "옥룡면", "옥곡면", "진상면", "진월면", "다압면", "골약동",
        "중마동", "광영동", "태인동", "금호동",
    ),
    "담양군": (
        "담양읍", "봉산면", "고서면", "남면", "창평면", "대덕면", "무정면", "금성면",
        "용면", "월산면", "수북면", "대전면",
    ),
    "곡성군": (
        "곡성읍", "오곡면", "삼기면", "석곡면", "목사동면", "죽곡면", "고달면", "옥과면",
        "입면", "겸면", "오산면",
    ),
    "구례군": ("구례읍", "문척면", "간전면", "토지면", "마산면", "광의면", "용방면", "산동면"),
    "고흥군": (
        "고흥읍", "도양읍", "풍양면", "도덕면", "금산면", "도화면", "포두면", "봉래면",
        "동일면", "점암면", "영남면", "과역면", "남양면", "동강면", "대서면", "두원면",
    ),
    "보성군": (
        "보성읍", "벌교읍", "노동면", "미력면", "겸백면", "율어면", "복내면", "문덕면",
        "조성면", "득량면", "회천면", "웅치면",
    ),
    "화순군": (
        "화순읍", "한천면", "춘양면", "청풍면", "이양면", "능주면", "도곡면", "도암면",
        "이서면", "북면", "동복면", "남면", "동면",
    ),
    "장흥군": (
        "장흥읍", "관산읍", "대덕읍", "용산면", "안양면", "장동면", "장평면", "유치면",
        "부산면", "회진면",
    ),
    "강진군": (
        "강진읍", "군동면", "칠량면", "대구면", "도암면", "신전면", "성전면", "작천면",
        "병영면", "옴천면", "마량면",
    ),
    "해남군": (
        "해남읍", "삼산면", "화산면", "현산면", "송지면", "북평면", "북일면", "옥천면",
        "계곡면", "마산면", "황산면", "산이면", "문내면", "화원면",
    ),
    "영암군": (
        "영암읍", "삼호읍", "덕진면", "금정면", "신북면", "시종면", "도포면", "군서면",
        "서호면", "학산면", "미암면",
    ),
    "무안군": (
        "무안읍", "일로읍", "삼향읍", "몽탄면", "청계면", "현경면", "망운면", "해제면", "운남면",
    ),
    "함평군": (
        "함평읍", "손불면", "신광면", "학교면", "엄다면", "대동면", "나산면", "해보면", "월야면",
    ),
    "영광군": (
        "영광읍", "백수읍", "홍농읍", "대마면", "묘량면", "불갑면", "군서면", "군남면",
        "염산면", "법성면", "낙월면",
    ),
    "장성군": (
        "장성읍", "진원면", "남면", "동화면", "삼서면", "삼계면", "황룡면", "서삼면",
        "북일면", "북이면", "북하면",
    ),
    "완도군": (
        "완도읍", "금일읍", "노화읍", "군외면", "신지면", "고금면", "약산면", "청산면",
        "소안면", "금당면", "보길면", "생일면",
    ),
    "진도군": ("진도읍", "군내면", "고군면", "의신면", "임회면", "지산면", "조도면"),
    "신안군": (
        "지도읍", "압해읍", "증도면", "임자면", "자은면", "비금면", "도초면", "흑산면",
        "하의면", "신의면", "장산면", "안좌면", "팔금면", "암태면",
    ),
}


def catalog_payload() -> dict:
    """Serialize every table for clients that render selects and labels."""

    return {
        "farmingTypes": FARMING_TYPES.as_dicts(),
        "mainCrops": [
            {
                "value": code,
                "label": label,
                "subTypes": CROP_DETAILS[code].as_dicts(),
            }
            for code, label in MAIN_CROP_CATEGORIES
        ],
        "equipmentTypes": EQUIPMENT_TYPES.as_dicts(),
        "manufacturers": MANUFACTURERS.as_dicts(),
        "attachmentTypes": ATTACHMENT_TYPES.as_dicts(),
        "attachmentManufacturers": {
            code: table.as_dicts() for code, table in ATTACHMENT_MANUFACTURERS.items()
        },
        "saleTypes": SALE_TYPES.as_dicts(),
        "tradeTypes": TRADE_TYPES.as_dicts(),
        "saleStatuses": SALE_STATUSES.as_dicts(),
        "mailOptions": MAIL_OPTIONS.as_dicts(),
        "province": PROVINCE_NAME,
        "cities": list(PROVINCE_CITIES),
        "townships": {city: list(towns) for city, towns in CITY_TOWNSHIPS.items()},
    }
