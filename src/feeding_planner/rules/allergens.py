"""Allergen keywords mapped to related product and ingredient terms."""

from types import MappingProxyType

_MILK = (
    "乳",
    "ミルク",
    "カゼイン",
    "ホエイ",
    "ラクト",
    "milk",
    "casein",
    "whey",
    "lacto-",
)
_SOY = ("大豆", "ソイ", "ソヤ", "レシチン", "soy", "lecithin")
_EGG = ("卵", "エッグ", "オボ", "リゾチーム", "egg", "ovalbumin", "lysozyme")
_FISH = ("魚", "フィッシュ", "EPA", "DHA", "魚油", "fish")
_WHEAT = ("小麦", "グルテン", "ウィート", "wheat", "gluten")
_PEANUT = ("ピーナッツ", "落花生", "peanut")
_NUTS = ("ナッツ", "アーモンド", "クルミ", "almond", "walnut")
_CORN = ("トウモロコシ", "コーン", "マルトデキストリン", "corn", "maltodextrin")

ALLERGEN_PRODUCT_MAP: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "乳": _MILK,
        "牛乳": _MILK,
        "ミルク": _MILK,
        "乳製品": _MILK,
        "乳糖": ("乳糖", "ラクトース", "乳", "lactose"),
        "milk": _MILK,
        "dairy": _MILK,
        "lactose": ("乳糖", "ラクトース", "lactose", "milk"),
        "大豆": _SOY,
        "ソイ": _SOY,
        "soy": _SOY,
        "卵": _EGG,
        "鶏卵": _EGG,
        "egg": _EGG,
        "魚": _FISH,
        "魚油": ("魚油", "EPA", "DHA", "fish oil"),
        "fish": _FISH,
        "小麦": _WHEAT,
        "グルテン": _WHEAT,
        "wheat": _WHEAT,
        "gluten": _WHEAT,
        "ピーナッツ": _PEANUT,
        "落花生": _PEANUT,
        "peanut": _PEANUT,
        "ナッツ": _NUTS,
        "トウモロコシ": _CORN,
        "コーン": _CORN,
        "corn": _CORN,
    }
)
