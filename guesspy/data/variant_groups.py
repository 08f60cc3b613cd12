"""Built-in variant groups.

Each group lists spellings that count as the same word during play. The first
spelling names the group. Spellings are normalized when the dictionary is
built, so they may be written with spaces or hyphens.
"""

# American / British (and other regional) spellings of the same word
REGIONAL_SPELLINGS: tuple[tuple[str, ...], ...] = (
    ("airplane", "aeroplane"),
    ("aluminum", "aluminium"),
    ("analyze", "analyse"),
    ("apologize", "apologise"),
    ("armor", "armour"),
    ("behavior", "behaviour"),
    ("catalog", "catalogue"),
    ("center", "centre"),
    ("color", "colour"),
    ("cozy", "cosy"),
    ("defense", "defence"),
    ("dialog", "dialogue"),
    ("favorite", "favourite"),
    ("fiber", "fibre"),
    ("flavor", "flavour"),
    ("gray", "grey"),
    ("harbor", "harbour"),
    ("honor", "honour"),
    ("humor", "humour"),
    ("jewelry", "jewellery"),
    ("labor", "labour"),
    ("license", "licence"),
    ("liter", "litre"),
    ("meter", "metre"),
    ("mold", "mould"),
    ("mom", "mum", "mam"),
    ("mustache", "moustache"),
    ("neighbor", "neighbour"),
    ("offense", "offence"),
    ("organize", "organise"),
    ("pajamas", "pyjamas"),
    ("plow", "plough"),
    ("program", "programme"),
    ("realize", "realise"),
    ("rumor", "rumour"),
    ("skeptic", "sceptic"),
    ("sulfur", "sulphur"),
    ("theater", "theatre"),
    ("tire", "tyre"),
    ("traveler", "traveller"),
    ("vapor", "vapour"),
)

# Alternate spellings that drift too far for the typo threshold
ALTERNATE_SPELLINGS: tuple[tuple[str, ...], ...] = (
    ("axe", "ax"),
    ("barbecue", "barbeque", "bbq"),
    ("donut", "doughnut"),
    ("ketchup", "catsup"),
    ("okay", "ok"),
    ("omelet", "omelette"),
    ("racket", "racquet"),
    ("television", "tv", "telly"),
    ("whiskey", "whisky"),
    ("yogurt", "yoghurt", "yoghourt"),
)

BUILTIN_VARIANT_GROUPS: tuple[tuple[str, ...], ...] = REGIONAL_SPELLINGS + ALTERNATE_SPELLINGS
