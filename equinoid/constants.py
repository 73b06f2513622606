"""Constants for the equinoid breeding simulator."""

# 交配シミュレーションで遡る最大世代数（親=1, 祖父母=2, ...）
MAX_ANCESTOR_GENERATIONS = 5

# 血統樹表示で遡る最大世代数
MAX_PEDIGREE_GENERATIONS = 10

# 性別コード
SEX_MALE = "macho"
SEX_FEMALE = "femea"

SEX_CODES: tuple[str, ...] = (SEX_MALE, SEX_FEMALE)

# 交配シミュレーションで親の側を示すラベル
SIDE_SIRE = "sire"
SIDE_DAM = "dam"
