"""Drug-nutrient interaction rules for ICU nutrition management."""

from feeding_planner.domain.safety import DrugNutrientRule

_LOOP_DIURETICS = (
    "フロセミド",
    "ラシックス",
    "ブメタニド",
    "トルセミド",
    "furosemide",
    "lasix",
    "bumetanide",
    "torsemide",
    "ループ利尿",
)
_STEROIDS = (
    "プレドニゾロン",
    "メチルプレドニゾロン",
    "デキサメタゾン",
    "ヒドロコルチゾン",
    "ステロイド",
    "prednisolone",
    "dexamethasone",
    "hydrocortisone",
)
_GLUCOSE = ("炭水化物", "糖", "ブドウ糖", "グルコース", "glucose", "carbs")

DRUG_NUTRIENT_RULES: tuple[DrugNutrientRule, ...] = (
    DrugNutrientRule(
        id="warfarin-vitk",
        drug_keywords=("ワルファリン", "ワーファリン", "warfarin"),
        nutrient_keywords=("ビタミンK", "VitK", "フィトナジオン", "vitamin k"),
        severity="high",
        interaction=(
            "Warfarin is a vitamin K antagonist; vitamin K in enteral formulas "
            "weakens its anticoagulant effect."
        ),
        recommendation=(
            "Use a formula with a stable vitamin K content and monitor PT-INR "
            "closely, especially when starting or stopping enteral feeding."
        ),
    ),
    DrugNutrientRule(
        id="loop-diuretic-k",
        drug_keywords=_LOOP_DIURETICS,
        nutrient_keywords=("K", "カリウム", "potassium"),
        severity="high",
        interaction=(
            "Loop diuretics increase urinary potassium loss and can cause "
            "hypokalemia."
        ),
        recommendation=(
            "Monitor serum K regularly and consider potassium supplementation "
            "or a higher-potassium formula."
        ),
    ),
    DrugNutrientRule(
        id="loop-diuretic-mg",
        drug_keywords=_LOOP_DIURETICS,
        nutrient_keywords=("Mg", "マグネシウム", "magnesium"),
        severity="medium",
        interaction="Loop diuretics also increase urinary magnesium loss.",
        recommendation="Monitor serum Mg and supplement when it trends down.",
    ),
    DrugNutrientRule(
        id="insulin-glucose",
        drug_keywords=(
            "インスリン",
            "insulin",
            "ヒューマリン",
            "ノボリン",
            "ランタス",
            "トレシーバ",
            "ノボラピッド",
            "ヒューマログ",
        ),
        nutrient_keywords=_GLUCOSE,
        severity="high",
        interaction=(
            "Interrupting nutrition in a patient on insulin can cause severe "
            "hypoglycemia."
        ),
        recommendation=(
            "Adjust insulin whenever feeding is paused or reduced, check blood "
            "glucose frequently and keep insulin in step with the feeding "
            "schedule."
        ),
    ),
    DrugNutrientRule(
        id="phenytoin-enteral",
        drug_keywords=(
            "フェニトイン",
            "アレビアチン",
            "phenytoin",
            "ジフェニルヒダントイン",
        ),
        nutrient_keywords=("経腸", "enteral", "チューブ", "経管"),
        severity="high",
        interaction="Enteral feeding can reduce phenytoin absorption by over 40%.",
        recommendation=(
            "Hold enteral feeding for 2 hours before and after each phenytoin "
            "dose and monitor serum levels."
        ),
    ),
    DrugNutrientRule(
        id="ace-potassium",
        drug_keywords=(
            "ACE阻害",
            "エナラプリル",
            "カプトプリル",
            "リシノプリル",
            "ペリンドプリル",
            "enalapril",
            "captopril",
            "lisinopril",
            "ARB",
            "バルサルタン",
            "カンデサルタン",
            "オルメサルタン",
            "valsartan",
            "candesartan",
        ),
        nutrient_keywords=("K", "カリウム", "potassium"),
        severity="medium",
        interaction=(
            "ACE inhibitors and ARBs reduce potassium excretion and can cause "
            "hyperkalemia."
        ),
        recommendation=(
            "Be careful with potassium-rich formulas and monitor serum K "
            "regularly."
        ),
    ),
    DrugNutrientRule(
        id="steroid-calcium",
        drug_keywords=_STEROIDS,
        nutrient_keywords=("Ca", "カルシウム", "calcium"),
        severity="medium",
        interaction=(
            "Corticosteroids reduce calcium absorption and raise osteoporosis "
            "risk."
        ),
        recommendation=(
            "Consider calcium and vitamin D supplementation; monitor bone "
            "density during long courses."
        ),
    ),
    DrugNutrientRule(
        id="steroid-glucose",
        drug_keywords=_STEROIDS,
        nutrient_keywords=_GLUCOSE,
        severity="medium",
        interaction="Corticosteroids increase insulin resistance and hyperglycemia.",
        recommendation=(
            "Tighten glucose monitoring and consider a low-carbohydrate formula "
            "or insulin adjustment."
        ),
    ),
    DrugNutrientRule(
        id="aminoglycoside-mg",
        drug_keywords=(
            "ゲンタマイシン",
            "トブラマイシン",
            "アミカシン",
            "アミノグリコシド",
            "gentamicin",
            "tobramycin",
            "amikacin",
        ),
        nutrient_keywords=("Mg", "マグネシウム", "magnesium"),
        severity="medium",
        interaction=(
            "Aminoglycosides block renal magnesium reabsorption and cause "
            "hypomagnesemia."
        ),
        recommendation="Monitor serum Mg and replace it when low.",
    ),
    DrugNutrientRule(
        id="mtx-folate",
        drug_keywords=("メトトレキサート", "MTX", "methotrexate", "リウマトレックス"),
        nutrient_keywords=("葉酸", "フォレート", "folate", "folic"),
        severity="medium",
        interaction="Methotrexate inhibits folate metabolism.",
        recommendation=(
            "Give folinic acid from the day after methotrexate dosing."
        ),
    ),
    DrugNutrientRule(
        id="ppi-absorption",
        drug_keywords=(
            "オメプラゾール",
            "ランソプラゾール",
            "エソメプラゾール",
            "ラベプラゾール",
            "PPI",
            "プロトンポンプ",
            "omeprazole",
            "lansoprazole",
        ),
        nutrient_keywords=("Mg", "マグネシウム", "Ca", "カルシウム", "Fe", "鉄"),
        severity="low",
        interaction=(
            "Long-term PPI use can reduce absorption of Mg, Ca, Fe and B12."
        ),
        recommendation="Monitor trace elements periodically during long-term use.",
    ),
)
