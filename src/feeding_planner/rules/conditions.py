"""Condition-specific product selection rules."""

from feeding_planner.domain.conditions import (
    ConditionCategory,
    ConditionProductRule,
    NutrientFilter,
    ProductCriteria,
)
from feeding_planner.domain.products import (
    AMINO_ACIDS,
    CARBS,
    ENERGY_DENSITY,
    FAT,
    GLUCOSE,
    LIPIDS,
    PHOSPHORUS,
    POTASSIUM,
    PROTEIN,
)

CONDITION_PRODUCT_RULES: tuple[ConditionProductRule, ...] = (
    ConditionProductRule(
        condition=ConditionCategory.STANDARD,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("エンシュア", "エネーボ", "アイソカル", "CZ-Hi", "メイバランス"),
            nutrient_filters=(NutrientFilter(ENERGY_DENSITY, "gte", 1.0),),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("エルネオパ", "フルカリック"),
            nutrient_filters=(NutrientFilter(ENERGY_DENSITY, "gt", 0),),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=1.0,
        cautions=(),
        label="Standard",
    ),
    ConditionProductRule(
        condition=ConditionCategory.RENAL,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("リーナレン",),
            nutrient_filters=(
                NutrientFilter(POTASSIUM, "lt", 30),
                NutrientFilter(PHOSPHORUS, "lt", 15),
            ),
            sort_by=POTASSIUM,
            sort_order="asc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ネオアミユー", "キドミン"),
            nutrient_filters=(NutrientFilter(POTASSIUM, "lt", 30),),
            sort_by=POTASSIUM,
            sort_order="asc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=0.8,
        cautions=(
            "Monitor electrolytes (K, P, Na) regularly",
            "Excess protein may worsen renal function",
        ),
        label="Renal failure",
    ),
    ConditionProductRule(
        condition=ConditionCategory.RENAL_DIALYSIS,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("リーナレン", "プロシュア", "ペプタメン"),
            nutrient_filters=(),
            sort_by=PROTEIN,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ネオアミユー", "エルネオパ"),
            nutrient_filters=(),
            sort_by=AMINO_ACIDS,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=1.2,
        cautions=(
            "Adjust K and P intake between dialysis and non-dialysis days",
            "Raise protein to cover dialysis losses (about 10 g per session)",
        ),
        label="Dialysis",
    ),
    ConditionProductRule(
        condition=ConditionCategory.HEPATIC,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("アミノレバン", "ヘパン", "BCAA"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("モリヘパミン", "アミノレバン", "テルフィス"),
            nutrient_filters=(),
            sort_by=AMINO_ACIDS,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=0.8,
        cautions=(
            "Check blood ammonia regularly",
            "Revisit protein restriction if hepatic encephalopathy worsens",
            "A late evening snack of about 200 kcal is beneficial",
        ),
        label="Hepatic failure",
    ),
    ConditionProductRule(
        condition=ConditionCategory.DIABETES,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("グルセルナ", "インスロー"),
            nutrient_filters=(NutrientFilter(CARBS, "lt", 15),),
            sort_by=CARBS,
            sort_order="asc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ネオアミユー", "ヴィーンF"),
            nutrient_filters=(NutrientFilter(GLUCOSE, "lt", 10),),
            sort_by=GLUCOSE,
            sort_order="asc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=1.0,
        cautions=(
            "Target blood glucose 140-180 mg/dL with insulin",
            "Watch for hypoglycemia (<70 mg/dL)",
        ),
        label="Diabetes",
    ),
    ConditionProductRule(
        condition=ConditionCategory.RESPIRATORY,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("プルモケア", "オキシーパ"),
            nutrient_filters=(NutrientFilter(FAT, "gt", 4),),
            sort_by=FAT,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("イントラリポス", "エルネオパ"),
            nutrient_filters=(),
            sort_by=LIPIDS,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=1.0,
        cautions=(
            "Overfeeding increases CO2 production",
            "Indirect calorimetry is preferred for RQ management",
        ),
        label="Respiratory failure",
    ),
    ConditionProductRule(
        condition=ConditionCategory.BURN,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("ペプタメン", "プロシュア", "インパクト"),
            nutrient_filters=(NutrientFilter(PROTEIN, "gt", 3.0),),
            sort_by=PROTEIN,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("エルネオパ", "ネオアミユー", "イントラリポス"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        max_products=3,
        energy_multiplier=1.5,
        protein_multiplier=1.5,
        cautions=(
            "Set energy targets individually (Curreri or indirect calorimetry)",
            "Monitor electrolytes and blood glucose frequently",
        ),
        label="Burns",
    ),
    ConditionProductRule(
        condition=ConditionCategory.REFEEDING_RISK,
        preferred_route="parenteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("エンシュア", "ペプタメン"),
            nutrient_filters=(NutrientFilter(ENERGY_DENSITY, "lte", 1.0),),
            sort_by=ENERGY_DENSITY,
            sort_order="asc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ヴィーンF", "ビカーボン", "ソルデム"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="asc",
        ),
        max_products=1,
        energy_multiplier=0.4,
        protein_multiplier=0.5,
        cautions=(
            "Start at 10 kcal/kg/day or less",
            "Measure P, K and Mg daily and replace when low",
            "Give thiamine (vitamin B1) before starting nutrition",
            "Increase to the energy target over 3-5 days",
        ),
        label="Refeeding syndrome risk",
    ),
    ConditionProductRule(
        condition=ConditionCategory.CARDIAC,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("イノラス", "テルミール2.0", "アクトスルー", "サンエット-2.0"),
            nutrient_filters=(NutrientFilter(ENERGY_DENSITY, "gte", 1.5),),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("エルネオパ",),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        max_products=1,
        energy_multiplier=0.9,
        protein_multiplier=1.0,
        cautions=(
            "Keep total daily fluid (IV, oral, feeds) within the restriction",
            "Check weight, edema and urine output daily",
            "Manage sodium restriction (<2 g/day) in parallel",
        ),
        label="Heart failure",
    ),
    ConditionProductRule(
        condition=ConditionCategory.POSTOPERATIVE,
        preferred_route="either",
        enteral_criteria=ProductCriteria(
            name_keywords=("ペプタメン", "エレンタール", "インパクト"),
            nutrient_filters=(NutrientFilter(PROTEIN, "gt", 3.0),),
            sort_by=PROTEIN,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("エルネオパ", "モリヘパミン"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.2,
        protein_multiplier=1.3,
        cautions=(
            "Move to enteral feeding as soon as it is tolerated",
            "Manage the central venous catheter to limit infection risk",
        ),
        label="Postoperative / trauma",
    ),
    ConditionProductRule(
        condition=ConditionCategory.PEDIATRIC_STANDARD,
        preferred_route="enteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("エンシュア", "アイソカル1.0ジュニア", "エレンタールP"),
            nutrient_filters=(NutrientFilter(ENERGY_DENSITY, "gte", 1.0),),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ネオアミユー", "イントラリポス"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="desc",
        ),
        max_products=2,
        energy_multiplier=1.0,
        protein_multiplier=1.0,
        cautions=(
            "Set energy targets by age and weight",
            "Increase volume as gastrointestinal tolerance allows",
        ),
        label="Pediatric",
    ),
    ConditionProductRule(
        condition=ConditionCategory.PEDIATRIC_NICU,
        preferred_route="parenteral",
        enteral_criteria=ProductCriteria(
            name_keywords=("エレンタールP", "アイソカル1.0ジュニア"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="asc",
        ),
        parenteral_criteria=ProductCriteria(
            name_keywords=("ネオアミユー", "イントラリポス", "ビカーボン"),
            nutrient_filters=(),
            sort_by=ENERGY_DENSITY,
            sort_order="asc",
        ),
        max_products=3,
        energy_multiplier=1.0,
        protein_multiplier=1.0,
        cautions=(
            "Energy target 110-120 kcal/kg/day by body weight",
            "Protein 3.5-4.5 g/kg/day",
            "Start lipids at 0.5 g/kg/day and increase gradually",
            "Check for hyperglycemia and electrolyte abnormalities daily",
        ),
        label="NICU",
    ),
)


def rule_for_condition(
    condition: ConditionCategory,
    rules: tuple[ConditionProductRule, ...] = CONDITION_PRODUCT_RULES,
) -> ConditionProductRule:
    """Return the rule for a condition, falling back to the first (standard)."""
    for rule in rules:
        if rule.condition == condition:
            return rule
    return rules[0]
