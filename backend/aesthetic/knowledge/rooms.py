"""Curated per-room reference data: augmentation entries, fallback templates,
room label synonyms, and the primary-room priority order.
"""

from aesthetic.models.contracts import LayoutIdea, RoomKnowledgeEntry, RoomTemplate

DEFAULT_TEMPLATE = "Default"
FLEXIBLE_SPACE = "Flexible Space"

ROOM_PRIORITY_ORDER: tuple[str, ...] = (
    "Living Room",
    "Primary Bedroom",
    "Kitchen",
    "Dining Room",
    "Home Office",
    "Bathroom",
    "Gaming Studio",
    FLEXIBLE_SPACE,
)

ROOM_SYNONYMS: dict[str, str] = {
    "living room": "Living Room",
    "livingroom": "Living Room",
    "family room": "Living Room",
    "lounge": "Living Room",
    "primary bedroom": "Primary Bedroom",
    "bedroom": "Primary Bedroom",
    "master bedroom": "Primary Bedroom",
    "guest bedroom": "Primary Bedroom",
    "kitchen": "Kitchen",
    "dining room": "Dining Room",
    "dining": "Dining Room",
    "home office": "Home Office",
    "office": "Home Office",
    "study": "Home Office",
    "workspace": "Home Office",
    "bathroom": "Bathroom",
    "bath": "Bathroom",
    "ensuite": "Bathroom",
    "gaming studio": "Gaming Studio",
    "gaming room": "Gaming Studio",
    "gaming": "Gaming Studio",
}


def _ideas(room: str, *summaries: str) -> tuple[LayoutIdea, ...]:
    return tuple(LayoutIdea(room=room, summary=summary) for summary in summaries)


ROOM_KNOWLEDGE: dict[str, RoomKnowledgeEntry] = {
    "Living Room": RoomKnowledgeEntry(
        palette=("#F1EDE5", "#2E3A45", "#B08E6E", "#6B9080"),
        layout_ideas=_ideas(
            "Living Room",
            "Float the sofa and accent chairs around a central coffee table to encourage "
            "conversation while keeping a clear perimeter path.",
            "Anchor a media wall with a low console and flank it with closed storage or "
            "bookcases to balance open shelving.",
        ),
        decor_tips=(
            "Layer a natural fiber rug beneath the seating zone to visually ground the arrangement.",
            "Mix two to three accent metals across lighting and hardware for depth without "
            "overwhelming the palette.",
            "Introduce oversized art or a statement mirror on the focal wall to amplify scale.",
            "Style the coffee table with stacked books and a sculptural bowl for lived-in polish.",
        ),
        furniture=(
            "Structured three-seat sofa with performance fabric",
            "Pair of swivel accent chairs",
            "Oversized coffee table with rounded edges",
            "Media console with concealed storage",
        ),
        lighting=(
            "Blend a ceiling fixture with staggered floor and table lamps to control "
            "evening ambience."
        ),
        window_treatments=(
            "Frame the window with lined linen drapery layered over solar shades to manage glare."
        ),
    ),
    "Primary Bedroom": RoomKnowledgeEntry(
        palette=("#F7F4EF", "#C9ADA7", "#9A8C98", "#4A5568"),
        layout_ideas=_ideas(
            "Primary Bedroom",
            "Center the bed on the longest wall and float matching nightstands to establish "
            "symmetry and clear bedside access.",
            "Create a reading corner near the window with a lounge chair, floor lamp, and "
            "small side table.",
        ),
        decor_tips=(
            "Upgrade to layered bedding - crisp sheets, a quilt, and a textured duvet - for "
            "boutique comfort.",
            "Use sconce lighting or swing-arm lamps to free up nightstand surface area.",
            "Ground the bed with an area rug that extends at least 24 inches beyond the frame.",
            "Style dressers with a balanced trio of art, greenery, and personal objects.",
        ),
        furniture=(
            "Upholstered queen or king bed with tall headboard",
            "Pair of closed-storage nightstands",
            "Low-profile dresser or chest of drawers",
            "Accent chair with ottoman",
        ),
        lighting="Add dimmable bedside lighting and a diffused overhead fixture for layered control.",
        window_treatments=(
            "Opt for blackout drapery layered with sheer panels for both softness and light control."
        ),
    ),
    "Kitchen": RoomKnowledgeEntry(
        palette=("#F4F1E8", "#D4B483", "#5E503F", "#3F612D"),
        layout_ideas=_ideas(
            "Kitchen",
            "Keep tall cabinetry consolidated on one wall and reserve the opposite run for "
            "prep space with uninterrupted countertops.",
            "Define casual dining or coffee bar seating with slim counter stools and a pair "
            "of pendant lights.",
        ),
        decor_tips=(
            "Introduce a statement runner to soften hard surfaces and add colour.",
            "Swap builder-grade hardware for matte or brushed pulls to elevate cabinetry.",
            "Style open shelves with a balance of cookbooks, ceramics, and greenery.",
            "Install under-cabinet lighting to brighten work zones and highlight backsplash texture.",
        ),
        furniture=(
            "Counter-height stools with wipeable seats",
            "Slim rolling island or butcher block cart",
            "Glass or wood canister set for open shelving",
            "Pot rack or magnetic knife strip to free counter space",
        ),
        lighting=(
            "Layer task lighting at the counters with pendants or a flush mount for overall "
            "illumination."
        ),
        window_treatments=(
            "Use moisture-resistant woven shades or cafe curtains to soften the window without "
            "blocking daylight."
        ),
    ),
    "Dining Room": RoomKnowledgeEntry(
        palette=("#F5EFE6", "#B08968", "#223843", "#6E7E85"),
        layout_ideas=_ideas(
            "Dining Room",
            "Center a statement dining table beneath a chandelier and allow at least 36 inches "
            "of clearance around the perimeter.",
            "Add a sideboard along one wall for serving space and concealed storage, styling "
            "the surface with layered art.",
        ),
        decor_tips=(
            "Incorporate upholstered host chairs at the table ends for comfort.",
            "Ground the table with a durable rug sized to keep chairs fully on the pile when "
            "pulled out.",
            "Use a trio of candlesticks or a low arrangement as a flexible centerpiece.",
            "Introduce a large mirror or artwork to amplify depth and distribute light.",
        ),
        furniture=(
            "Extendable dining table in warm wood",
            "Mix of upholstered and wood dining chairs",
            "Credenza or buffet with integrated storage",
            "Bar cabinet or shelving for glassware",
        ),
        lighting=(
            "Hang a dimmable chandelier or linear pendant 30-34 inches above the tabletop for "
            "even coverage."
        ),
        window_treatments="Panel drapery on rings adds softness and helps absorb sound in dining zones.",
    ),
    "Home Office": RoomKnowledgeEntry(
        palette=("#F2F0EB", "#91A6A6", "#4A6670", "#1B1B1E"),
        layout_ideas=_ideas(
            "Home Office",
            "Place the desk perpendicular to the window to avoid monitor glare while enjoying "
            "natural light.",
            "Establish a background shelving wall for storage, display, and video-call polish.",
        ),
        decor_tips=(
            "Add a pinboard or magnetic rail system above the desk for active projects.",
            "Incorporate a rug to dampen sound and define the workspace within open plans.",
            "Use cord management trays or grommets to keep cables streamlined.",
            "Bring in biophilic touches - plants or water elements - to reduce visual fatigue.",
        ),
        furniture=(
            "Height-adjustable desk or spacious workstation",
            "Ergonomic task chair with lumbar support",
            "Modular shelving or filing credenza",
            "Task lamp with adjustable arm",
        ),
        lighting=(
            "Pair task lighting at the desk with diffused ambient lighting to prevent harsh "
            "contrasts."
        ),
        window_treatments="Install adjustable shades to cut midday glare while maintaining view lines.",
    ),
    "Bathroom": RoomKnowledgeEntry(
        palette=("#EEF2F5", "#BCCCDC", "#8AA6C1", "#2E4057"),
        layout_ideas=_ideas(
            "Bathroom",
            "Use wall-mounted storage or recessed niches to keep daily items organized without "
            "crowding the vanity.",
            "Add a small stool or plant stand near the tub or shower to introduce warmth and "
            "function.",
        ),
        decor_tips=(
            "Upgrade hardware and fixtures to a cohesive metal finish for an instant refresh.",
            "Layer plush towels and a textured bathmat for spa-level comfort.",
            "Introduce moisture-loving plants to soften hard surfaces.",
            "Swap dated mirror frames for clean-lined options or install backlit mirrors.",
        ),
        furniture=(
            "Freestanding storage ladder or shelving tower",
            "Vanity tray assortment for countertop essentials",
            "Framed mirror or medicine cabinet",
            "Water-resistant accent stool",
        ),
        lighting="Combine sconces at eye level with overhead lighting for flattering illumination.",
        window_treatments=(
            "Use privacy glass film or vinyl shades that withstand humidity while diffusing light."
        ),
    ),
    "Gaming Studio": RoomKnowledgeEntry(
        palette=("#11121A", "#2F2D4A", "#5F5AA2", "#24E8FF"),
        layout_ideas=_ideas(
            "Gaming Studio",
            "Float the desk to allow clean cable routing behind the setup and position "
            "monitors at eye height.",
            "Create an auxiliary lounge zone with a small sofa or beanbag seating for breaks "
            "and spectators.",
        ),
        decor_tips=(
            "Layer addressable LED strips along shelving and behind monitors for ambient lighting.",
            "Add acoustic panels or foam tiles to reduce echo during streaming.",
            "Display collectibles on floating shelves with backlighting for dimension.",
            "Use a matte wall finish to minimize glare on screens.",
        ),
        furniture=(
            "Sit/stand gaming desk with cable trough",
            "Ergonomic gaming chair with lumbar support",
            "Dual monitor arms with integrated cable clips",
            "Media cabinet for console storage",
        ),
        lighting="Combine RGB accent lighting with neutral task lighting to reduce eye strain.",
        window_treatments=(
            "Install blackout roller shades to control natural light during daytime sessions."
        ),
    ),
}


ROOM_TEMPLATES: dict[str, RoomTemplate] = {
    "Living Room": RoomTemplate(
        template_name="Modern Minimalist Living Room",
        style_name="Modern Minimalist",
        style_summary=(
            "Streamlined seating, airy volumes, and restrained accents keep the living room "
            "calm yet functional."
        ),
        color_palette=("#ECECEC", "#1F4E5F", "#A6B7B9", "#2B2B2B"),
        layout_ideas=_ideas(
            "Living Room",
            "Position a low-profile sectional around a slim media console to frame the focal "
            "wall while leaving circulation paths open.",
            "Float a nesting coffee table set to create flexible surfaces without crowding the "
            "seating zone.",
            "Define a reading corner with a lounge chair, arc lamp, and slim side table tucked "
            "near the window.",
        ),
        decor_tips=(
            "Layer neutral textured throws and cushions to soften the minimalist palette.",
            "Anchor the seating area with a tonal area rug sized to fit front furniture legs.",
            "Use oversized framed art or a sculptural mirror to lift the vertical sightline.",
        ),
        furniture_suggestions=(
            "Modular sectional sofa",
            "Nesting coffee tables",
            "Slim media console",
            "Accent lounge chair",
        ),
        recommended_lighting="Layered warm LED",
        observations=("Template emphasises open sightlines and concealed storage.",),
    ),
    "Primary Bedroom": RoomTemplate(
        template_name="Serene Bedroom Retreat",
        style_name="Scandinavian Cozy",
        style_summary=(
            "Soft textiles, warm wood accents, and diffused lighting create a calm sleep sanctuary."
        ),
        color_palette=("#F5F5F5", "#D9CFC0", "#B4A284", "#2F4858"),
        layout_ideas=_ideas(
            "Primary Bedroom",
            "Frame the bed with floating nightstands and warm bedside pendants to keep the "
            "floor visually clear.",
            "Layer a bench at the foot of the bed for seating and to ground the bedding ensemble.",
            "Float a reading nook with a boucle chair and slim floor lamp near the window for "
            "a cozy retreat.",
        ),
        decor_tips=(
            "Mix crisp cotton bedding with a textured throw to add dimension.",
            "Keep the palette restrained to three neutrals plus one accent for calm cohesion.",
            "Use woven baskets or lidded boxes inside the closet for concealed storage.",
        ),
        furniture_suggestions=(
            "Upholstered platform bed",
            "Floating nightstands",
            "Storage bench",
            "Lounge chair",
        ),
        recommended_lighting="Warm bedside pendants",
        observations=("Template enhances symmetry around the headboard wall.",),
    ),
    "Home Office": RoomTemplate(
        template_name="Contemporary Workspace",
        style_name="Modern Workspace",
        style_summary=(
            "Ergonomic zoning and cable management keep the workstation tidy and productive."
        ),
        color_palette=("#F2F2F2", "#1A1A1A", "#4C6EF5", "#9CA3AF"),
        layout_ideas=_ideas(
            "Home Office",
            "Float an adjustable desk facing natural light while keeping monitors perpendicular "
            "to windows to control glare.",
            "Add a wall-mounted shelving rail or pegboard to stage peripherals and paperwork "
            "vertically.",
            "Tuck a compact filing cabinet or credenza under the window line for hidden storage.",
        ),
        decor_tips=(
            "Route cables through under-desk trays or grommets to keep the floor clear.",
            "Use a task light with adjustable arms to supplement overhead lighting.",
            "Incorporate acoustic panels or curtains if the room doubles as a meeting space.",
        ),
        furniture_suggestions=(
            "Sit-stand desk",
            "Ergonomic desk chair",
            "Cable management tray",
            "Wall-mounted shelving",
        ),
        recommended_lighting="Task lighting plus ambient LED",
        observations=("Template prioritises productivity and comfort.",),
    ),
    "Gaming Studio": RoomTemplate(
        template_name="Futuristic Gaming Hub",
        style_name="Futuristic Gamer",
        style_summary="Layered RGB accents and performance furniture frame the battlestation.",
        color_palette=("#141B2D", "#3F2B96", "#A876F5", "#24E8FF"),
        layout_ideas=_ideas(
            "Gaming Studio",
            "Anchor the desk against a solid wall with monitor arms to maximise viewing angles "
            "and keep the surface clear.",
            "Add floating shelves or display cases for collectibles, lit with LED strips for "
            "ambient glow.",
            "Position an ergonomic lounge chair or bean bag in a secondary corner for console "
            "or VR sessions.",
        ),
        decor_tips=(
            "Use bias lighting behind monitors to reduce eye strain during long sessions.",
            "Integrate acoustic foam tiles or fabric panels to soften sound reflections.",
            "Organise controllers and accessories with wall-mounted racks or drawer inserts.",
        ),
        furniture_suggestions=(
            "Height-adjustable gaming desk",
            "Ergonomic gaming chair",
            "Dual monitor arms",
            "LED strip lighting kit",
        ),
        recommended_lighting="RGB accent lighting",
        observations=("Template keeps cable runs hidden and highlights RGB layering.",),
    ),
    "Kitchen": RoomTemplate(
        template_name="Streamlined Kitchen",
        style_name="Contemporary Kitchen",
        style_summary=(
            "Clean cabinetry, layered lighting, and pragmatic storage define the culinary zone."
        ),
        color_palette=("#FFFFFF", "#F1F5F9", "#4B5563", "#F97316"),
        layout_ideas=_ideas(
            "Kitchen",
            "Zone prep, cook, and clean stations along the work triangle to preserve efficient "
            "movement.",
            "Introduce a mobile island or cart for extra prep surface and tucked-away storage.",
            "Incorporate a breakfast ledge or banquette for casual dining adjacent to the main "
            "work area.",
        ),
        decor_tips=(
            "Swap builder-grade hardware for matte metal pulls to modernise cabinetry.",
            "Use under-cabinet lighting to brighten countertops without glare.",
            "Style open shelves with a restrained mix of cookware and greenery.",
        ),
        furniture_suggestions=(
            "Mobile kitchen island",
            "Counter stools",
            "Matte metal hardware set",
            "Under-cabinet lighting kit",
        ),
        recommended_lighting="Task lighting with warm ambient pendants",
        observations=("Template reinforces the work triangle and layered lighting.",),
    ),
    "Bathroom": RoomTemplate(
        template_name="Spa Bathroom Refresh",
        style_name="Spa Retreat",
        style_summary=(
            "Natural textures and warm illumination transform the bath into a calm retreat."
        ),
        color_palette=("#F8FAFC", "#CBD5F5", "#94A3B8", "#0F172A"),
        layout_ideas=_ideas(
            "Bathroom",
            "Frame the vanity with mirrors and layered sconces to balance grooming light.",
            "Add a slim ladder shelf or recessed niche for towels and spa accessories.",
            "Introduce a teak bench or stool near the shower for seating and styling.",
        ),
        decor_tips=(
            "Use matching dispensers and trays to declutter the vanity surface.",
            "Incorporate eucalyptus or other aromatics for a spa-like atmosphere.",
            "Layer plush towels and a textured bath mat for warmth underfoot.",
        ),
        furniture_suggestions=(
            "Floating vanity",
            "LED vanity sconces",
            "Ladder shelf",
            "Teak shower bench",
        ),
        recommended_lighting="Soft white vanity sconces",
        observations=("Template balances storage and spa cues.",),
    ),
    DEFAULT_TEMPLATE: RoomTemplate(
        template_name="Versatile Interior Refresh",
        style_name="Contemporary Neutral",
        style_summary=(
            "Balanced modern styling with adaptable furniture pieces fits unspecified rooms."
        ),
        color_palette=("#F5F5F5", "#1F2937", "#9CA3AF", "#F59E0B"),
        layout_ideas=_ideas(
            FLEXIBLE_SPACE,
            "Define the main zone with a statement rug and anchor furniture along the longest "
            "wall to keep circulation open.",
            "Layer storage with a combination of closed cabinets and open display shelves.",
            "Introduce a multi-purpose table or bench that adapts for work, dining, or hobbies "
            "as you {intent}.",
        ),
        decor_tips=(
            "Stick to a 60/30/10 colour distribution to keep accents cohesive.",
            "Use mirrors or glossy finishes to bounce available light.",
            "Ground the palette with natural textures like wood, leather, or boucle.",
        ),
        furniture_suggestions=(
            "Modular shelving system",
            "Multi-purpose table",
            "Accent rug",
            "Statement lighting fixture",
        ),
        recommended_lighting="Layered ambient and task lighting",
        observations=("Template adapts to ambiguous spaces when vision data is limited.",),
    ),
}
