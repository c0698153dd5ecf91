"""Nutrient catalogue and the external nutrient-code table."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NutrientInfo:
    """Display name and unit for a tracked nutrient."""

    label: str
    unit: str


class Nutrient(Enum):
    """Closed set of nutrients the engine knows about."""

    CALORIES = NutrientInfo("Calories", "kcal")
    PROTEIN = NutrientInfo("Protein", "g")
    FAT = NutrientInfo("Fat", "g")
    CARBOHYDRATES = NutrientInfo("Carbohydrates", "g")
    ASH = NutrientInfo("Ash", "g")
    STARCH = NutrientInfo("Starch", "g")
    SUCROSE = NutrientInfo("Sucrose", "g")
    GLUCOSE = NutrientInfo("Glucose (dextrose)", "g")
    FRUCTOSE = NutrientInfo("Fructose", "g")
    LACTOSE = NutrientInfo("Lactose", "g")
    MALTOSE = NutrientInfo("Maltose", "g")
    ALCOHOL = NutrientInfo("Alcohol, ethyl", "g")
    WATER = NutrientInfo("Water", "g")
    MANNITOL = NutrientInfo("Mannitol", "g")
    SORBITOL = NutrientInfo("Sorbitol", "g")
    CAFFEINE = NutrientInfo("Caffeine", "mg")
    THEOBROMINE = NutrientInfo("Theobromine", "mg")
    SUGARS = NutrientInfo("Sugars", "g")
    GALACTOSE = NutrientInfo("Galactose", "g")
    XYLITOL = NutrientInfo("Xylitol", "g")
    FIBER = NutrientInfo("Fiber", "g")
    SUGAR_ALCOHOL = NutrientInfo("Sugar Alcohol", "g")
    CALCIUM = NutrientInfo("Calcium", "mg")
    IRON = NutrientInfo("Iron", "mg")
    MAGNESIUM = NutrientInfo("Magnesium", "mg")
    PHOSPHORUS = NutrientInfo("Phosphorus", "mg")
    POTASSIUM = NutrientInfo("Potassium", "mg")
    SODIUM = NutrientInfo("Sodium", "mg")
    ZINC = NutrientInfo("Zinc", "mg")
    COPPER = NutrientInfo("Copper", "mg")
    FLUORIDE = NutrientInfo("Fluoride", "mcg")
    MANGANESE = NutrientInfo("Manganese", "mg")
    SELENIUM = NutrientInfo("Selenium", "mcg")
    VITAMIN_A = NutrientInfo("Vitamin A", "IU")
    RETINOL = NutrientInfo("Retinol", "mcg")
    VITAMIN_A_RAE = NutrientInfo("Vitamin A (RAE)", "mcg")
    BETA_CAROTENE = NutrientInfo("Carotene, beta", "mcg")
    ALPHA_CAROTENE = NutrientInfo("Carotene, alpha", "mcg")
    VITAMIN_E = NutrientInfo("Vitamin E (alpha-tocopherol)", "mg")
    VITAMIN_D = NutrientInfo("Vitamin D", "IU")
    VITAMIN_D2 = NutrientInfo("Vitamin D2 (ergocalciferol)", "mcg")
    VITAMIN_D3 = NutrientInfo("Vitamin D3 (cholecalciferol)", "mcg")
    VITAMIN_D_D2_D3 = NutrientInfo("Vitamin D (D2 + D3)", "mcg")
    BETA_CRYPTOXANTHIN = NutrientInfo("Cryptoxanthin, beta", "mcg")
    LYCOPENE = NutrientInfo("Lycopene", "mcg")
    LUTEIN_ZEAXANTHIN = NutrientInfo("Lutein + zeaxanthin", "mcg")
    BETA_TOCOPHEROL = NutrientInfo("Tocopherol, beta", "mg")
    GAMMA_TOCOPHEROL = NutrientInfo("Tocopherol, gamma", "mg")
    DELTA_TOCOPHEROL = NutrientInfo("Tocopherol, delta", "mg")
    ALPHA_TOCOTRIENOL = NutrientInfo("Tocotrienol, alpha", "mg")
    BETA_TOCOTRIENOL = NutrientInfo("Tocotrienol, beta", "mg")
    GAMMA_TOCOTRIENOL = NutrientInfo("Tocotrienol, gamma", "mg")
    DELTA_TOCOTRIENOL = NutrientInfo("Tocotrienol, delta", "mg")
    VITAMIN_C = NutrientInfo("Vitamin C", "mg")
    VITAMIN_B1 = NutrientInfo("Vitamin B1", "mg")
    VITAMIN_B2 = NutrientInfo("Vitamin B2", "mg")
    VITAMIN_B3 = NutrientInfo("Vitamin B3", "mg")
    VITAMIN_B5 = NutrientInfo("Vitamin B5", "mg")
    VITAMIN_B6 = NutrientInfo("Vitamin B6", "mg")
    VITAMIN_B9 = NutrientInfo("Vitamin B9", "mcg")
    VITAMIN_B12 = NutrientInfo("Vitamin B12", "mcg")
    CHOLINE = NutrientInfo("Choline", "mg")
    MENAQUINONE_4 = NutrientInfo("Menaquinone-4", "mcg")
    DIHYDROPHYLLOQUINONE = NutrientInfo("Dihydrophylloquinone", "mcg")
    VITAMIN_K = NutrientInfo("Vitamin K", "mcg")
    FOLIC_ACID = NutrientInfo("Vitamin B9 (folic acid)", "mcg")
    FOOD_FOLATE = NutrientInfo("Vitamin B9 (food folate)", "mcg")
    FOLATE_DFE = NutrientInfo("Vitamin B9 (DFE)", "mcg")
    BETAINE = NutrientInfo("Betaine", "mg")
    TRYPTOPHAN = NutrientInfo("Tryptophan", "g")
    THREONINE = NutrientInfo("Threonine", "g")
    ISOLEUCINE = NutrientInfo("Isoleucine", "g")
    LEUCINE = NutrientInfo("Leucine", "g")
    LYSINE = NutrientInfo("Lysine", "g")
    METHIONINE = NutrientInfo("Methionine", "g")
    CYSTINE = NutrientInfo("Cystine", "g")
    PHENYLALANINE = NutrientInfo("Phenylalanine", "g")
    TYROSINE = NutrientInfo("Tyrosine", "g")
    VALINE = NutrientInfo("Valine", "g")
    ARGININE = NutrientInfo("Arginine", "g")
    HISTIDINE = NutrientInfo("Histidine", "g")
    ALANINE = NutrientInfo("Alanine", "g")
    ASPARTIC_ACID = NutrientInfo("Aspartic acid", "g")
    GLUTAMIC_ACID = NutrientInfo("Glutamic acid", "g")
    GLYCINE = NutrientInfo("Glycine", "g")
    PROLINE = NutrientInfo("Proline", "g")
    SERINE = NutrientInfo("Serine", "g")
    HYDROXYPROLINE = NutrientInfo("Hydroxyproline", "g")
    ADDED_SUGARS = NutrientInfo("Added Sugars", "g")
    VITAMIN_E_ADDED = NutrientInfo("Vitamin E (added)", "mg")
    VITAMIN_B12_ADDED = NutrientInfo("Vitamin B12 (added)", "mcg")
    CHOLESTEROL = NutrientInfo("Cholesterol", "mg")
    TRANS_FAT = NutrientInfo("Trans Fat", "g")
    SATURATED_FAT = NutrientInfo("Saturated Fat", "g")
    PHYTOSTEROLS = NutrientInfo("Phytosterols", "mg")
    STIGMASTEROL = NutrientInfo("Stigmasterol", "mg")
    CAMPESTEROL = NutrientInfo("Campesterol", "mg")
    BETA_SITOSTEROL = NutrientInfo("Beta-sitosterol", "mg")
    MONOUNSATURATED_FAT = NutrientInfo("Monounsaturated Fat", "g")
    POLYUNSATURATED_FAT = NutrientInfo("Polyunsaturated Fat", "g")
    TRANS_MONOENOIC_FAT = NutrientInfo("Trans Monoenoic Fat", "g")
    TRANS_POLYENOIC_FAT = NutrientInfo("Trans Polyenoic Fat", "g")
    ERYTHRITOL = NutrientInfo("Erythritol", "g")
    GLYCERIN = NutrientInfo("Glycerin", "g")
    MALTITOL = NutrientInfo("Maltitol", "g")
    ISOMALT = NutrientInfo("Isomalt", "g")
    LACTITOL = NutrientInfo("Lactitol", "g")
    ALLULOSE = NutrientInfo("Allulose", "g")

    @property
    def label(self) -> str:
        """Human readable nutrient name."""
        return self.value.label

    @property
    def unit(self) -> str:
        """Unit the nutrient amount is reported in."""
        return self.value.unit


MACRO_CODES: dict[int, Nutrient] = {
    203: Nutrient.PROTEIN,
    204: Nutrient.FAT,
    205: Nutrient.CARBOHYDRATES,
    208: Nutrient.CALORIES,
}

NUTRIENT_CODES: dict[int, Nutrient] = {
    207: Nutrient.ASH,
    209: Nutrient.STARCH,
    210: Nutrient.SUCROSE,
    211: Nutrient.GLUCOSE,
    212: Nutrient.FRUCTOSE,
    213: Nutrient.LACTOSE,
    214: Nutrient.MALTOSE,
    221: Nutrient.ALCOHOL,
    255: Nutrient.WATER,
    260: Nutrient.MANNITOL,
    261: Nutrient.SORBITOL,
    262: Nutrient.CAFFEINE,
    263: Nutrient.THEOBROMINE,
    269: Nutrient.SUGARS,
    287: Nutrient.GALACTOSE,
    290: Nutrient.XYLITOL,
    291: Nutrient.FIBER,
    299: Nutrient.SUGAR_ALCOHOL,
    301: Nutrient.CALCIUM,
    303: Nutrient.IRON,
    304: Nutrient.MAGNESIUM,
    305: Nutrient.PHOSPHORUS,
    306: Nutrient.POTASSIUM,
    307: Nutrient.SODIUM,
    309: Nutrient.ZINC,
    312: Nutrient.COPPER,
    313: Nutrient.FLUORIDE,
    315: Nutrient.MANGANESE,
    317: Nutrient.SELENIUM,
    318: Nutrient.VITAMIN_A,
    319: Nutrient.RETINOL,
    320: Nutrient.VITAMIN_A_RAE,
    321: Nutrient.BETA_CAROTENE,
    322: Nutrient.ALPHA_CAROTENE,
    323: Nutrient.VITAMIN_E,
    324: Nutrient.VITAMIN_D,
    325: Nutrient.VITAMIN_D2,
    326: Nutrient.VITAMIN_D3,
    328: Nutrient.VITAMIN_D_D2_D3,
    334: Nutrient.BETA_CRYPTOXANTHIN,
    337: Nutrient.LYCOPENE,
    338: Nutrient.LUTEIN_ZEAXANTHIN,
    341: Nutrient.BETA_TOCOPHEROL,
    342: Nutrient.GAMMA_TOCOPHEROL,
    343: Nutrient.DELTA_TOCOPHEROL,
    344: Nutrient.ALPHA_TOCOTRIENOL,
    345: Nutrient.BETA_TOCOTRIENOL,
    346: Nutrient.GAMMA_TOCOTRIENOL,
    347: Nutrient.DELTA_TOCOTRIENOL,
    401: Nutrient.VITAMIN_C,
    404: Nutrient.VITAMIN_B1,
    405: Nutrient.VITAMIN_B2,
    406: Nutrient.VITAMIN_B3,
    410: Nutrient.VITAMIN_B5,
    415: Nutrient.VITAMIN_B6,
    417: Nutrient.VITAMIN_B9,
    418: Nutrient.VITAMIN_B12,
    421: Nutrient.CHOLINE,
    428: Nutrient.MENAQUINONE_4,
    429: Nutrient.DIHYDROPHYLLOQUINONE,
    430: Nutrient.VITAMIN_K,
    431: Nutrient.FOLIC_ACID,
    432: Nutrient.FOOD_FOLATE,
    435: Nutrient.FOLATE_DFE,
    454: Nutrient.BETAINE,
    501: Nutrient.TRYPTOPHAN,
    502: Nutrient.THREONINE,
    503: Nutrient.ISOLEUCINE,
    504: Nutrient.LEUCINE,
    505: Nutrient.LYSINE,
    506: Nutrient.METHIONINE,
    507: Nutrient.CYSTINE,
    508: Nutrient.PHENYLALANINE,
    509: Nutrient.TYROSINE,
    510: Nutrient.VALINE,
    511: Nutrient.ARGININE,
    512: Nutrient.HISTIDINE,
    513: Nutrient.ALANINE,
    514: Nutrient.ASPARTIC_ACID,
    515: Nutrient.GLUTAMIC_ACID,
    516: Nutrient.GLYCINE,
    517: Nutrient.PROLINE,
    518: Nutrient.SERINE,
    521: Nutrient.HYDROXYPROLINE,
    539: Nutrient.ADDED_SUGARS,
    573: Nutrient.VITAMIN_E_ADDED,
    578: Nutrient.VITAMIN_B12_ADDED,
    601: Nutrient.CHOLESTEROL,
    605: Nutrient.TRANS_FAT,
    606: Nutrient.SATURATED_FAT,
    636: Nutrient.PHYTOSTEROLS,
    638: Nutrient.STIGMASTEROL,
    639: Nutrient.CAMPESTEROL,
    641: Nutrient.BETA_SITOSTEROL,
    645: Nutrient.MONOUNSATURATED_FAT,
    646: Nutrient.POLYUNSATURATED_FAT,
    693: Nutrient.TRANS_MONOENOIC_FAT,
    695: Nutrient.TRANS_POLYENOIC_FAT,
    1001: Nutrient.ERYTHRITOL,
    1002: Nutrient.GLYCERIN,
    1003: Nutrient.MALTITOL,
    1004: Nutrient.ISOMALT,
    1005: Nutrient.LACTITOL,
    1006: Nutrient.ALLULOSE,
}

# Codes that land on a named profile field instead of the micronutrient map.
# Mono- and polyunsaturated fat both feed unsaturated_fat.
PROFILE_FIELD_CODES: dict[int, str] = {
    203: "protein",
    204: "fat",
    205: "carbohydrates",
    208: "calories",
    269: "sugar",
    291: "fiber",
    605: "trans_fat",
    606: "saturated_fat",
    645: "unsaturated_fat",
    646: "unsaturated_fat",
}


def nutrient_for_code(code: int) -> Nutrient | None:
    """Return the nutrient for an external nutrient code, if known."""
    return MACRO_CODES.get(code) or NUTRIENT_CODES.get(code)


def find_nutrient(label: str) -> Nutrient | None:
    """Look up a nutrient by its display name, ignoring case."""
    wanted = label.strip().lower()
    for nutrient in Nutrient:
        if nutrient.label.lower() == wanted:
            return nutrient
    return None
