"""Diagnosis keyword table ordered by clinical urgency."""

from feeding_planner.domain.conditions import ConditionCategory, KeywordRule

KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        category=ConditionCategory.RENAL_DIALYSIS,
        keywords=(
            "透析",
            "HD",
            "CHDF",
            "CRRT",
            "hemodialysis",
            "血液透析",
            "腹膜透析",
            "CAPD",
            "dialysis",
        ),
        priority=10,
    ),
    KeywordRule(
        category=ConditionCategory.RENAL,
        keywords=(
            "腎不全",
            "腎障害",
            "CKD",
            "AKI",
            "急性腎障害",
            "慢性腎臓病",
            "腎機能低下",
            "renal",
            "kidney",
        ),
        priority=9,
    ),
    KeywordRule(
        category=ConditionCategory.BURN,
        keywords=("熱傷", "burn", "TBSA", "やけど", "広範囲熱傷"),
        priority=8,
    ),
    KeywordRule(
        category=ConditionCategory.REFEEDING_RISK,
        keywords=(
            "refeeding",
            "リフィーディング",
            "長期絶食",
            "拒食症",
            "神経性やせ症",
            "食思不振症",
            "食欲不振症",
            "飢餓",
            "高度低栄養",
            "anorexia",
            "starvation",
        ),
        priority=7,
    ),
    KeywordRule(
        category=ConditionCategory.HEPATIC,
        keywords=(
            "肝不全",
            "肝硬変",
            "肝性脳症",
            "肝障害",
            "劇症肝炎",
            "肝臓",
            "cirrhosis",
            "hepatic",
            "liver failure",
        ),
        priority=6,
    ),
    KeywordRule(
        category=ConditionCategory.RESPIRATORY,
        keywords=(
            "呼吸不全",
            "ARDS",
            "人工呼吸",
            "COPD",
            "気管切開",
            "呼吸器",
            "ventilator",
            "酸素化不良",
            "respiratory failure",
        ),
        priority=5,
    ),
    KeywordRule(
        category=ConditionCategory.CARDIAC,
        keywords=(
            "心不全",
            "CHF",
            "心筋梗塞",
            "AMI",
            "心臓",
            "cardiac",
            "浮腫",
            "体液過剰",
            "heart failure",
        ),
        priority=4,
        fluid_restriction=1500,
    ),
    KeywordRule(
        category=ConditionCategory.DIABETES,
        keywords=(
            "糖尿病",
            "DM",
            "高血糖",
            "インスリン",
            "HbA1c",
            "diabetes",
            "血糖コントロール不良",
            "hyperglycemia",
        ),
        priority=3,
    ),
    KeywordRule(
        category=ConditionCategory.POSTOPERATIVE,
        keywords=(
            "術後",
            "外傷",
            "手術",
            "周術期",
            "postop",
            "trauma",
            "多発外傷",
            "創傷治癒",
        ),
        priority=2,
    ),
)

REFEEDING_KEYWORDS: tuple[str, ...] = (
    "refeeding",
    "リフィーディング",
    "長期絶食",
    "拒食症",
    "食思不振症",
    "食欲不振症",
    "神経性やせ症",
    "低栄養",
    "飢餓",
    "BMI<16",
    "BMI 16",
    "高度るいそう",
    "anorexia",
    "malnutrition",
    "starvation",
)
