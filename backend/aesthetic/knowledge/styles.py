"""Style presets selected by keyword from the scene text.

Order matters: the first preset with a keyword hit wins.
"""

from aesthetic.models.contracts import StylePreset

STYLE_PRESETS: tuple[StylePreset, ...] = (
    StylePreset(
        id="modern-minimalist",
        name="Modern Minimalist",
        description="Clean lines, bright neutral palette, and functional pieces with hidden storage.",
        keywords=("modern", "minimal", "minimalist", "sleek", "clean", "contemporary"),
        palette=("#1F4E5F", "#287D7D", "#A6B7B9", "#F2E8CF"),
        furniture=(
            "Low-profile modular sofa",
            "Matte black arc floor lamp",
            "Slim-profile storage credenza",
        ),
        decor_tips=(
            "Keep accessories grouped in odd numbers for balance.",
            "Use oversized wall art to anchor open sight lines.",
        ),
    ),
    StylePreset(
        id="scandinavian-cozy",
        name="Scandinavian Cozy",
        description="Soft textures, warm woods, and airy lighting inspired by Nordic interiors.",
        keywords=("scandi", "scandinavian", "cozy", "cosy", "hygge", "nordic", "light wood"),
        palette=("#F4F1DE", "#E07A5F", "#3D405B", "#81B29A"),
        furniture=(
            "Light oak open shelving system",
            "Boucle lounge chair",
            "Textured wool area rug",
        ),
        decor_tips=(
            "Layer tonal textiles - linen, wool, and cotton - to soften corners.",
            "Introduce greenery in sculptural ceramic planters.",
        ),
    ),
    StylePreset(
        id="industrial-loft",
        name="Industrial Loft",
        description="Exposed finishes, matte metals, and bold geometric accents for dramatic contrast.",
        keywords=("industrial", "loft", "metal", "brick", "warehouse"),
        palette=("#2E2E2E", "#595959", "#B36A5E", "#F2E8CF"),
        furniture=(
            "Reclaimed wood dining table",
            "Metal pipe shelving",
            "Concrete statement planter",
        ),
        decor_tips=(
            "Balance raw finishes with soft lighting and warm leather accents.",
            "Layer area rugs to define seating zones within open plans.",
        ),
    ),
    StylePreset(
        id="coastal-calm",
        name="Coastal Calm",
        description="Sun-washed neutrals paired with sea-glass blues and organic woven details.",
        keywords=("coastal", "beach", "ocean", "navy", "seaside", "hampton"),
        palette=("#12343B", "#1D7874", "#7CC6C3", "#F4F9E9"),
        furniture=(
            "Rattan hanging pendant",
            "Slipcovered sectional",
            "Weathered driftwood coffee table",
        ),
        decor_tips=(
            "Incorporate striped textiles to echo seaside cabanas.",
            "Style open shelving with coral, glass, and woven baskets.",
        ),
    ),
    StylePreset(
        id="boho-eclectic",
        name="Boho Eclectic",
        description="Collected layers of pattern, plants, and artisanal textures for a relaxed feel.",
        keywords=("boho", "bohemian", "eclectic", "patterned", "colorful", "vintage"),
        palette=("#8C4A3F", "#D9A441", "#5C946E", "#F4E4C1"),
        furniture=(
            "Low slung tufted sofa",
            "Hand-carved credenza with cane doors",
            "Cluster of ceramic side tables",
        ),
        decor_tips=(
            "Mix global textiles like kilims and mud cloths for depth.",
            "Layer potted plants at different heights to enliven corners.",
        ),
    ),
    StylePreset(
        id="futuristic-gamer",
        name="Futuristic Gamer",
        description=(
            "Neon-lit tech lounge with ergonomic gear, layered LEDs, "
            "and acoustically tuned panels."
        ),
        keywords=("gaming", "gamer", "rgb", "pc setup", "desk setup", "streaming", "led", "monitor"),
        palette=("#141B2D", "#3F2B96", "#A876F5", "#24E8FF"),
        furniture=(
            "Adjustable sit/stand gaming desk",
            "Ergonomic mesh-back gaming chair",
            "Dual-arm monitor mount with cable management",
        ),
        decor_tips=(
            "Layer addressable LED strips along shelving and behind displays for immersive glow.",
            "Treat walls with acoustic foam or fabric panels to dampen echo around the battlestation.",
        ),
    ),
)
