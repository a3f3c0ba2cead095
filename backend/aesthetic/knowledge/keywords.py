"""Keyword tables used to read free text and vision labels.

Matching is always lower-cased substring matching, so multi-word keywords
("pc setup") and stems ("bath") both work.
"""

from aesthetic.models.contracts import ColorKeyword, FeatureRule, RoomHint

FEATURE_RULES: tuple[FeatureRule, ...] = (
    FeatureRule(
        id="storage",
        keywords=(
            "storage", "built-in", "built in", "cabinet", "closet", "wardrobe",
            "organize", "organise", "shelving", "clutter",
        ),
        layout_hint="Integrate floor-to-ceiling storage with concealed hardware to keep clutter in check.",
        decor_tip="Balance closed cabinetry with a few open niches to display curated pieces.",
        furniture_hint="Modular storage console",
        observation="Brief prioritises additional storage solutions.",
    ),
    FeatureRule(
        id="workspace",
        keywords=("workspace", "desk", "office", "workstation", "study", "work from home", "wfh"),
        layout_hint="Carve an ergonomic workstation near natural light and keep cables routed cleanly.",
        decor_tip="Float a compact desk with task lighting and slim shelving for vertical storage.",
        furniture_hint="Height-adjustable desk",
        observation="Client needs a dedicated workspace inside the room.",
    ),
    FeatureRule(
        id="lighting",
        keywords=(
            "lighting", "lights", "lamp", "illuminate", "brighten", "pendant", "chandelier", "sconce",
        ),
        layout_hint="Layer ambient, task, and accent lighting to even out brightness across the zone.",
        decor_tip="Upgrade to dimmable LED fixtures and add sculptural lamps for mood control.",
        furniture_hint="Arc floor lamp",
        observation="Prompt calls for enhanced lighting strategies.",
    ),
    FeatureRule(
        id="cozy",
        keywords=("cozy", "cosy", "warm", "inviting", "snug", "comfortable"),
        layout_hint="Pull seating closer together with plush textiles to make the space feel inviting.",
        decor_tip="Layer chunky throws, textured pillows, and a high-pile rug.",
        furniture_hint="Deep-seat sectional sofa",
        observation="User emphasises a cozy atmosphere.",
    ),
    FeatureRule(
        id="minimal",
        keywords=(
            "minimal", "streamlined", "clean lines", "clutter-free", "minimalist", "pared back",
        ),
        layout_hint="Maintain clear sight lines with low-profile silhouettes and hidden storage.",
        decor_tip="Keep surfaces edited and repeat a tight neutral palette.",
        furniture_hint="Slimline media console",
        observation="Design brief favours a minimalist expression.",
    ),
    FeatureRule(
        id="plants",
        keywords=("plant", "plants", "greenery", "biophilic", "botanical", "foliage"),
        layout_hint="Cluster greenery near windows and shelves to reinforce biophilic cues.",
        decor_tip="Mix planter heights and textures for layered foliage moments.",
        furniture_hint="Statement indoor planter",
        observation="Prompt highlights integrating greenery.",
    ),
    FeatureRule(
        id="color-pop",
        keywords=(
            "pop of color", "colour pop", "color pop", "bold color", "bright color",
            "accent color", "statement color",
        ),
        layout_hint=(
            "Introduce a focal accent through art, upholstery, or a feature wall in the "
            "requested hues."
        ),
        decor_tip="Balance saturated tones with grounding neutrals so the palette feels intentional.",
        furniture_hint="Accent chair in highlight colour",
        observation="Client wants stronger color statements.",
    ),
    FeatureRule(
        id="kids",
        keywords=("kid", "kids", "child", "children", "play", "playroom", "nursery"),
        layout_hint="Zone a kid-friendly corner with soft flooring and reachable storage.",
        decor_tip="Choose wipeable finishes and rounded edges for safety.",
        furniture_hint="Toy storage bench",
        observation="Brief mentions kid-friendly requirements.",
    ),
    FeatureRule(
        id="pets",
        keywords=("pet", "dog", "cat", "pets"),
        layout_hint="Incorporate durable, pet-friendly fabrics and carve out a pet retreat.",
        decor_tip="Opt for washable slipcovers and layered mats for pet areas.",
        furniture_hint="Pet-friendly performance rug",
        observation="Prompt includes pet-focused needs.",
    ),
    FeatureRule(
        id="entertaining",
        keywords=("entertain", "entertaining", "hosting", "dinner party", "gathering"),
        layout_hint="Plan generous circulation around seating and dining zones for guests.",
        decor_tip="Stage a beverage console and layered mood lighting for hosting.",
        furniture_hint="Expandable dining table",
        observation="User wants the space ready for entertaining.",
    ),
)

COLOR_KEYWORDS: tuple[ColorKeyword, ...] = (
    ColorKeyword(name="navy", hex="#1F3A60", keywords=("navy", "deep blue")),
    ColorKeyword(name="sage", hex="#9CAF88", keywords=("sage", "sage green")),
    ColorKeyword(name="emerald", hex="#2F6B4F", keywords=("emerald", "forest green", "deep green")),
    ColorKeyword(name="terracotta", hex="#C86A3C", keywords=("terracotta", "terra cotta", "rust")),
    ColorKeyword(name="blush", hex="#F2C6C2", keywords=("blush", "dusty pink", "rose")),
    ColorKeyword(name="charcoal", hex="#42464D", keywords=("charcoal", "graphite", "dark gray")),
    ColorKeyword(name="mustard", hex="#D9A441", keywords=("mustard", "ochre", "amber")),
    ColorKeyword(name="teal", hex="#2A8C82", keywords=("teal", "aqua")),
    ColorKeyword(name="gold", hex="#D4AF37", keywords=("gold", "brass", "champagne")),
    ColorKeyword(name="white", hex="#F7F5F0", keywords=("white", "off white", "cream", "ivory")),
    ColorKeyword(name="black", hex="#1B1B1B", keywords=("black", "ebony")),
    ColorKeyword(name="beige", hex="#D8C7A5", keywords=("beige", "sand", "tan")),
    ColorKeyword(name="lavender", hex="#C4B5E7", keywords=("lavender", "lilac", "soft purple")),
    ColorKeyword(name="pewter", hex="#7E848C", keywords=("pewter", "steel", "gunmetal")),
    ColorKeyword(name="copper", hex="#B8692E", keywords=("copper", "burnt orange")),
)

# (keywords, canonical label) pairs checked in order against the brief.
MATERIAL_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("wood", "timber", "oak"), "warm wood"),
    (("marble", "stone"), "stone surfaces"),
    (("metal", "brass", "gold"), "metallic accents"),
    (("concrete",), "concrete texture"),
    (("velvet",), "velvet upholstery"),
    (("linen",), "natural linen"),
)

GENERAL_KEYWORD_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("small", "compact", "studio"), "space-efficient solutions"),
    (("open concept", "open-plan", "open plan"), "open flow between zones"),
    (("sustainable", "eco"), "sustainable finishes"),
)

# Rooms inferred from the fused scene text (caption + prompt + vision summary).
SCENE_ROOM_HINTS: tuple[RoomHint, ...] = (
    RoomHint(
        name="Living Room",
        keywords=("living room", "living", "sofa", "couch", "sectional", "fireplace", "lounge"),
    ),
    RoomHint(
        name="Primary Bedroom",
        keywords=("bedroom", "bed", "headboard", "nightstand", "duvet", "pillow"),
    ),
    RoomHint(
        name="Dining Room",
        keywords=("dining room", "dining", "banquette", "dining table", "buffet"),
    ),
    RoomHint(
        name="Kitchen",
        keywords=("kitchen", "cooktop", "range", "cabinetry", "backsplash", "island", "pantry"),
    ),
    RoomHint(name="Home Office", keywords=("office", "workspace", "desk", "monitor", "keyboard")),
    RoomHint(
        name="Bathroom",
        keywords=("bathroom", "vanity", "bathtub", "shower", "sink", "powder room"),
    ),
    RoomHint(
        name="Outdoor Patio",
        keywords=("outdoor", "patio", "balcony", "terrace", "deck", "garden seating"),
    ),
    RoomHint(
        name="Gaming Studio",
        keywords=(
            "gaming", "gaming setup", "pc setup", "rgb lighting", "battle station",
            "dual monitor", "monitor setup", "streaming desk", "controller",
        ),
    ),
    RoomHint(name="Entryway", keywords=("entryway", "foyer", "hallway", "mudroom")),
    RoomHint(
        name="Window Nook",
        keywords=(
            "window seat", "window nook", "window", "bay window", "picture window",
            "curtain", "drapery", "drapes",
        ),
    ),
)

# Rooms inferred from the brief alone when nothing else is known.
PROMPT_ROOM_HINTS: tuple[RoomHint, ...] = (
    RoomHint(name="Living Room", keywords=("living", "lounge", "family")),
    RoomHint(name="Primary Bedroom", keywords=("bedroom", "primary", "master", "sleep")),
    RoomHint(name="Dining Room", keywords=("dining",)),
    RoomHint(name="Kitchen", keywords=("kitchen", "cook", "island", "pantry")),
    RoomHint(name="Home Office", keywords=("office", "desk", "study", "workspace")),
    RoomHint(
        name="Gaming Studio",
        keywords=("gaming", "rgb", "pc setup", "battle station", "battlestation", "streaming", "monitor"),
    ),
    RoomHint(name="Bathroom", keywords=("bath", "spa", "vanity")),
    RoomHint(name="Outdoor Patio", keywords=("patio", "outdoor", "balcony", "terrace")),
)

PROMPT_GAMING_CUES = (
    "gaming", "rgb", "battle station", "battlestation", "pc setup", "streaming", "dual monitor",
)
SCENE_GAMING_CUES = ("gaming", "rgb", "monitor", "setup", "station")

INTERIOR_CUES = ("room", "interior", "sofa", "bed", "kitchen", "bath", "desk", "workspace", "living")
EXTERIOR_CUES = ("outside", "exterior", "street", "tree", "sky", "landscape", "mountain", "garden")

# Vision label descriptions -> room. Keys go through the synonym table later.
ROOM_LABEL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Living Room": ("living room", "living space", "lounge", "family room"),
    "Primary Bedroom": ("primary bedroom", "master bedroom"),
    "Bedroom": ("bedroom", "sleeping area", "guest room"),
    "Dining Room": ("dining room", "dining area"),
    "Kitchen": ("kitchen", "kitchenette", "culinary space"),
    "Bathroom": ("bathroom", "restroom", "washroom"),
    "Home Office": ("home office", "workspace", "office"),
    "Gaming Studio": ("gaming room", "game room", "setup", "battlestation"),
    "Laundry Room": ("laundry room", "utility room"),
}

OBJECT_ROOM_HINTS: dict[str, str] = {
    "Bed": "Bedroom",
    "Nightstand": "Bedroom",
    "Dresser": "Bedroom",
    "Crib": "Bedroom",
    "Sofa": "Living Room",
    "Couch": "Living Room",
    "Coffee table": "Living Room",
    "Television": "Living Room",
    "Media console": "Living Room",
    "Dining table": "Dining Room",
    "Dining chair": "Dining Room",
    "Refrigerator": "Kitchen",
    "Stove": "Kitchen",
    "Oven": "Kitchen",
    "Sink": "Kitchen",
    "Kitchen appliance": "Kitchen",
    "Island": "Kitchen",
    "Toilet": "Bathroom",
    "Bathtub": "Bathroom",
    "Shower": "Bathroom",
    "Vanity": "Bathroom",
    "Desk": "Home Office",
    "Office chair": "Home Office",
    "Chair": "Home Office",
    "Laptop": "Home Office",
    "Computer monitor": "Gaming Studio",
    "Desktop computer": "Gaming Studio",
    "Keyboard": "Gaming Studio",
    "Mouse": "Gaming Studio",
    "Gaming chair": "Gaming Studio",
}

LIGHTING_LABEL_HINTS: dict[str, str] = {
    "Ceiling light": "Ceiling fixture",
    "Light fixture": "Ceiling fixture",
    "Chandelier": "Ceiling fixture",
    "Lamp": "Lamp lighting",
    "Lighting": "Mixed lighting",
    "Neon sign": "RGB/Accent lighting",
    "Neon": "RGB/Accent lighting",
    "Window": "Natural light",
}

VISION_FURNITURE_NAMES: dict[str, str] = {
    "Sofa": "Sofa",
    "Couch": "Sofa",
    "Coffee table": "Coffee Table",
    "Chair": "Chair",
    "Office chair": "Desk Chair",
    "Desk": "Desk",
    "Table": "Table",
    "Dining table": "Dining Table",
    "Dining chair": "Dining Chair",
    "Bed": "Bed",
    "Nightstand": "Nightstand",
    "Dresser": "Dresser",
    "Crib": "Crib",
    "Television": "Television",
    "Computer monitor": "Monitor",
    "Laptop": "Laptop",
    "Keyboard": "Keyboard",
    "Mouse": "Mouse",
    "Desktop computer": "PC Tower",
    "Refrigerator": "Refrigerator",
    "Oven": "Oven",
    "Stove": "Stove",
    "Sink": "Sink",
    "Island": "Kitchen Island",
    "Toilet": "Toilet",
    "Bathtub": "Bathtub",
    "Shower": "Shower",
    "Vanity": "Vanity",
}
