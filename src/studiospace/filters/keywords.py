"""Keyword lists used to classify listing titles.

These lists were tuned by hand against real search results and are neither
exhaustive nor disjoint from the office qualifiers. Matching is plain
lower-case substring containment, so trailing spaces ("spa ", "bar ") are
significant.
"""

# Kijiji URL path segments for residential categories
RESIDENTIAL_URL_PATHS: tuple[str, ...] = (
    "/v-apartments-condos/",
    "/v-house-rental/",
    "/v-room-rental/",
    "/v-short-term-rental/",
    "/v-condos-for-sale/",
    "/v-houses-for-sale/",
)

RESIDENTIAL_KEYWORDS: tuple[str, ...] = (
    "bedroom", "bachelor", "apartment", "condo", "townhouse",
    "house for rent", "home for rent", "homes for rent",
    "basement", "furnished room", "roommate",
    "1 bed", "2 bed", "3 bed", "4 bed", "5 bed",
    "1bed", "2bed", "3bed",
    "bdrm", "ensuite",
)

# Business types that cannot double as a photography studio
UNSUITABLE_KEYWORDS: tuple[str, ...] = (
    # Personal care / beauty
    "hair salon", "hair studio", "beauty salon", "nail salon", "nail studio",
    "barbershop", "barber shop", "barber studio",
    "massage", "spa ", "esthetics", "aesthetics", "skincare",
    "tattoo", "piercing",
    "beauty treatment", "treatment room", "beauty studio",
    "nails/", "/nails", "nails ", "groomer", "grooming",
    "chair rental", "chair & room",
    # Activity-specific studios
    "yoga", "pilates", "dance studio", "dance school", "dance class",
    "martial art", "boxing gym", "crossfit",
    "acting class", "acting school", "voice over", "voiceover",
    "music studio", "recording studio", "podcast studio",
    "rehearsal space", "rehearsal room", "music rehearsal",
    # Medical / professional
    "dental", "dentist", "medical office", "clinic", "pharmacy", "optometrist",
    "chiropract", "physiotherapy", "veterinar",
    "law office", "law firm", "accounting", "tax office",
    # Food & hospitality
    "restaurant", "food truck", "bakery", "cafe ", "café", "coffee shop",
    "food court", "food hall", "kitchen for rent", "catering",
    "food & beverage", "food and beverage", "food processing",
    "bar ", "pub ", "lounge", "nightclub",
    "walkin cooler", "walk-in cooler", "walk in cooler", "walkin freezer", "walk-in freezer",
    "cold storage",
    # Fitness
    "gym ", "fitness studio", "fitness centre", "fitness center",
    # Childcare
    "daycare", "child care", "childcare", "preschool", "montessori",
    # Automotive
    "auto shop", "mechanic", "car wash", "auto body", "tire shop",
    "car dealer", "gas station", "dealer licence", "dealer license",
    # Cannabis
    "dispensary", "cannabis",
    # Event-specific
    "event space", "event venue", "banquet hall", "wedding venue", "wedding hall",
    "party room", "party hall", "venue for rent",
    # Specific industrial use
    "metalworking", "welding", "machine shop", "woodworking",
    # Storage / parking
    "parking", "storage unit", "self storage", "mini storage",
    "locker",
    # Not a space (services, ads, etc.)
    "virtual office",
    "cabin ", "home office", "shed ",
    "deals on now", "call today",
    # Residential indicators
    "for sale by owner", "open house",
    "work&live", "live/work", "work/live", "live work",
    # Generic shared office
    "shared office", "co-working", "coworking",
    # Clearly small/wrong format
    "desk space", "hot desk", "cubicle",
)

# An "office" title is only kept when it also mentions one of these
OFFICE_QUALIFIERS: tuple[str, ...] = (
    "studio", "warehouse", "creative", "photo", "production",
)

MIN_TITLE_LENGTH = 8
