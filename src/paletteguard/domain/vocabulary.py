"""
Fixed vocabularies for palette requests.

Each table maps a canonical value to the one-line description used when
composing prompts. ALIASES maps common synonyms onto canonical values;
lookup is case-insensitive and never guesses beyond these tables.
"""

from types import MappingProxyType

MOODS = MappingProxyType(
    {
        "modern": "Clean, contemporary colors with high contrast and bold accents",
        "bold": "High-impact, saturated colors with strong contrast and presence",
        "minimal": "Neutral tones with subtle variations and plenty of whitespace",
        "vibrant": "Bold, energetic colors with high saturation and strong contrasts",
        "elegant": "Sophisticated, muted tones with refined color relationships",
        "playful": "Bright, cheerful colors with fun combinations and gradients",
        "professional": "Conservative, trustworthy colors suitable for business",
        "creative": "Experimental, artistic colors with unique combinations",
        "vintage": "Retro-inspired colors with muted tones and nostalgic feel",
        "futuristic": "Neon accents, dark backgrounds, cyberpunk-inspired colors",
        "organic": "Earth tones, natural colors inspired by nature",
        "luxury": "Rich, premium colors with metallic accents",
        "energetic": "High-energy colors that inspire action and movement",
        "calm": "Soft, soothing colors that promote relaxation and tranquility",
        "warm": "Cozy, inviting colors with warm undertones",
        "cool": "Refreshing, crisp colors with cool undertones",
    }
)

INDUSTRIES = MappingProxyType(
    {
        "technology": "Tech companies, startups, software, digital products",
        "healthcare": "Medical, wellness, pharmaceutical, healthcare services",
        "finance": "Banking, investment, insurance, financial services",
        "retail": "Online retail, shopping, marketplace, consumer goods",
        "education": "Schools, universities, online learning, educational content",
        "food": "Restaurants, food delivery, culinary, hospitality",
        "travel": "Tourism, hospitality, travel booking, adventure",
        "fashion": "Clothing, beauty, lifestyle, luxury brands",
        "entertainment": "Media, gaming, music, entertainment content",
        "other": "General purpose, miscellaneous applications",
    }
)

PALETTE_TYPES = MappingProxyType(
    {
        "monochromatic": "Single hue with various shades and tints",
        "analogous": "Adjacent colors on the color wheel",
        "complementary": "Opposite colors on the color wheel",
        "triadic": "Three evenly spaced colors on the color wheel",
        "tetradic": "Four colors forming a rectangle on the color wheel",
        "splitComplementary": "Base color plus two colors adjacent to its complement",
        "square": "Four colors evenly spaced around the color wheel",
        "custom": "Custom color combination based on specific requirements",
        "gradient": "Colors designed specifically for smooth gradient transitions",
    }
)

COLOR_HARMONIES = MappingProxyType(
    {
        "balanced": "Equal visual weight across all colors",
        "dominant": "One primary color dominates with supporting colors",
        "contrasting": "High contrast between light and dark elements",
        "subtle": "Low contrast with gentle color transitions",
        "dynamic": "Varying intensities creating visual rhythm",
    }
)

ACCESSIBILITY_LEVELS = MappingProxyType(
    {
        "AA": "Minimum 4.5:1 contrast ratio for text",
        "AAA": "Minimum 7:1 contrast ratio for text",
    }
)

ALIASES = MappingProxyType(
    {
        "mood": {
            "minimalist": "minimal",
            "minimalistic": "minimal",
            "simple": "minimal",
            "clean": "minimal",
            "fun": "playful",
            "cheerful": "playful",
            "sophisticated": "elegant",
            "refined": "elegant",
            "dynamic": "energetic",
            "active": "energetic",
            "exciting": "energetic",
            "serious": "professional",
            "business": "professional",
            "corporate": "professional",
            "relaxed": "calm",
            "peaceful": "calm",
            "soothing": "calm",
            "cozy": "warm",
            "inviting": "warm",
            "fresh": "cool",
            "crisp": "cool",
            "retro": "vintage",
            "natural": "organic",
            "premium": "luxury",
        },
        "industry": {
            "tech": "technology",
            "software": "technology",
            "saas": "technology",
            "it": "technology",
            "ecommerce": "retail",
            "e-commerce": "retail",
            "shopping": "retail",
            "medical": "healthcare",
            "health": "healthcare",
            "fintech": "finance",
            "banking": "finance",
            "school": "education",
            "learning": "education",
            "restaurant": "food",
            "hospitality": "travel",
            "tourism": "travel",
            "clothing": "fashion",
            "beauty": "fashion",
            "media": "entertainment",
            "gaming": "entertainment",
        },
        "palette_type": {
            "mono": "monochromatic",
            "single": "monochromatic",
            "adjacent": "analogous",
            "similar": "analogous",
            "opposite": "complementary",
            "contrast": "complementary",
            "triad": "triadic",
            "three": "triadic",
            "quad": "tetradic",
            "four": "tetradic",
            "split": "splitComplementary",
            "split-complementary": "splitComplementary",
            "split_complementary": "splitComplementary",
        },
        "color_harmony": {},
        "accessibility_level": {},
    }
)

VOCABULARIES = MappingProxyType(
    {
        "mood": MOODS,
        "industry": INDUSTRIES,
        "palette_type": PALETTE_TYPES,
        "color_harmony": COLOR_HARMONIES,
        "accessibility_level": ACCESSIBILITY_LEVELS,
    }
)


def resolve(field: str, value: str) -> str | None:
    """
    Map a user-supplied value onto its canonical vocabulary entry.

    Returns None when the value is neither a vocabulary entry nor a known alias.
    """
    if not isinstance(value, str):
        return None
    wanted = value.strip().lower()
    for canonical in VOCABULARIES[field]:
        if canonical.lower() == wanted:
            return canonical
    return ALIASES[field].get(wanted)


def describe(field: str, value: str) -> str:
    return VOCABULARIES[field][value]
