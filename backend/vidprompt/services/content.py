"""Fragment tables and selectors used to assemble video prompts.

Category-keyed tables fall back to DEFAULT_CATEGORY, style-keyed tables to
DEFAULT_STYLE. Every category listed in ``Category`` and every style listed
in ``Style`` has its own row.
"""
import random
from typing import Callable, Mapping, Sequence

Chooser = Callable[[Sequence[str]], str]

DEFAULT_CATEGORY = "Sports & Athletics"
DEFAULT_STYLE = "Cinematic"

SUBJECTS: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Athletic woman in her late 20s with shoulder-length blonde hair pulled back, wearing blue and white team jersey, focused intense eyes, muscular build from years of training",
        "Young male soccer player, early 20s with short dark hair, tan complexion, wearing red team uniform with sweat glistening, determined expression",
        "Professional tennis player, mid-30s woman with curly brown hair, wearing white athletic wear, graceful yet powerful stance, years of experience evident in her confident demeanor",
    ],
    "Urban & Street": [
        "Hip-hop dancer, early 20s Black male with athletic build, wearing baggy jeans and graphic hoodie, gold chain necklace, confident smile and expressive brown eyes",
        "Street artist, mid-20s woman with purple-streaked hair, paint-stained denim jacket over vintage band t-shirt, creative energy radiating from her focused expression",
        "Parkour athlete, late 20s mixed-race male with lean muscular build, wearing fitted black clothing and fingerless gloves, alert hazel eyes scanning the urban environment",
    ],
    "Nature & Wildlife": [
        "Majestic golden eagle with 6-foot wingspan, sharp amber eyes, dark brown and golden feathers catching sunlight, powerful talons extended in flight",
        "Mountain wildlife photographer, 40s bearded man in earth-tone outdoor gear, weathered hands holding professional camera, patient and observant demeanor",
        "Wild grizzly bear, massive 800-pound male with thick brown fur, intelligent dark eyes, powerful shoulders and distinctive hump, moving with surprising grace",
    ],
    "Human Drama": [
        "Piano teacher, 50s woman with graying hair in elegant bun, wearing flowing cream blouse, gentle yet passionate expression while playing, wedding ring catching light",
        "Young father, early 30s with kind eyes and slight beard stubble, wearing casual button-down shirt, tender expression while interacting with child",
        "Chef in professional kitchen, 40s Latino man with salt-and-pepper hair, white chef coat with food stains, intense concentration while cooking, calloused hands from years of work",
    ],
    "Vehicle Action": [
        "Formula 1 driver, late 20s with sharp features visible through helmet visor, wearing red racing suit with sponsor logos, gloved hands gripping steering wheel with precision",
        "Motorcycle racer, mid-30s woman with athletic build, wearing leather racing suit and protective helmet, fierce determination in her posture and stance",
        "Rally car driver, 35-year-old man with focused blue eyes, wearing flame-resistant racing suit and helmet, weathered hands showing years of motorsport experience",
    ],
    "Adventure & Extreme": [
        "Rock climber, athletic woman in her 30s with braided auburn hair, wearing climbing harness and chalk-dusted hands, sinewy arms and legs, determined expression scaling cliff face",
        "Professional surfer, 25-year-old man with sun-bleached hair and tanned skin, wearing black wetsuit, balanced stance on surfboard, reading the massive wave with expert timing",
        "Skydiving instructor, experienced 40s woman with short blonde hair, wearing colorful jumpsuit and goggles, confident smile and strong build from years of extreme sports",
    ],
}

WARDROBE: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Professional team jersey, athletic shorts, high-performance cleats",
        "Racing suit with sponsor logos, protective helmet, specialized footwear",
        "Training gear with moisture-wicking fabric, compression elements",
    ],
    "Urban & Street": [
        "Streetwear ensemble with designer sneakers, graphic elements",
        "Urban casual with layered textures, contemporary accessories",
        "Hip-hop inspired outfit with bold colors and statement pieces",
    ],
    "Nature & Wildlife": [
        "Outdoor expedition gear with weather-resistant materials",
        "Field researcher attire with practical pockets and earth tones",
        "Safari-style clothing with sun protection and utility features",
    ],
    "Human Drama": [
        "Business professional attire reflecting the character's occupation",
        "Casual everyday clothing with personal style elements",
        "Formal wear appropriate to the dramatic scene context",
    ],
    "Vehicle Action": [
        "Racing suit with flame-resistant materials, sponsor patches",
        "Mechanic coveralls with tool accessories, safety equipment",
        "Driving gloves, protective helmet, professional motorsport attire",
    ],
    "Adventure & Extreme": [
        "Technical outdoor gear with safety equipment and weatherproofing",
        "Extreme sports attire with protective padding and specialized accessories",
        "Adventure clothing with quick-dry materials and multiple pockets",
    ],
}

LOCATIONS: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Professional stadium with packed stands and field lighting",
        "Training facility with modern equipment and clean lines",
        "Outdoor sports complex with natural grass and scenic backdrop",
    ],
    "Urban & Street": [
        "Downtown cityscape with towering buildings and neon signs",
        "Street-level urban environment with graffiti and concrete textures",
        "Rooftop location overlooking metropolitan skyline",
    ],
    "Nature & Wildlife": [
        "Pristine wilderness with untouched natural beauty",
        "National park setting with diverse ecosystem elements",
        "Remote outdoor location far from civilization",
    ],
    "Human Drama": [
        "Interior domestic space with warm lighting and personal touches",
        "Professional workplace environment with contemporary design",
        "Public space where human stories naturally unfold",
    ],
    "Vehicle Action": [
        "Professional racing track with safety barriers and timing equipment",
        "Winding mountain road with challenging curves and elevation",
        "Urban street circuit with city backdrop and tight corners",
    ],
    "Adventure & Extreme": [
        "Remote mountain location with dramatic elevation and exposure",
        "Extreme sports venue with specialized safety equipment",
        "Wilderness setting that challenges human limits and abilities",
    ],
}

ENVIRONMENTS: dict[str, list[str]] = {
    "Sports & Athletics": [
        "High-energy atmosphere with crowd noise and competitive tension",
        "Professional setting with pristine conditions and optimal lighting",
        "Training environment with focused intensity and athletic equipment",
    ],
    "Urban & Street": [
        "Urban energy with city sounds, traffic, and metropolitan atmosphere",
        "Street culture environment with music, art, and community presence",
        "Contemporary city setting with modern architecture and urban design",
    ],
    "Nature & Wildlife": [
        "Natural soundscape with wind, water, and wildlife ambiance",
        "Pristine environment showcasing untouched natural beauty",
        "Ecosystem in balance with seasonal changes and natural rhythms",
    ],
    "Human Drama": [
        "Intimate setting that supports emotional storytelling",
        "Environment that reflects the character's internal state",
        "Space designed for human connection and meaningful interaction",
    ],
    "Vehicle Action": [
        "High-speed environment with engine sounds and mechanical precision",
        "Racing atmosphere with competitive energy and technical focus",
        "Automotive setting showcasing speed, power, and control",
    ],
    "Adventure & Extreme": [
        "Challenging environment that tests human limits and courage",
        "Natural setting with elements of danger and excitement",
        "Extreme conditions requiring specialized skills and equipment",
    ],
}

ACTIONS: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Executes perfect technique with athletic precision and competitive intensity",
        "Demonstrates peak physical performance in a crucial competitive moment",
        "Shows athletic mastery through fluid movement and strategic thinking",
    ],
    "Urban & Street": [
        "Moves through the urban environment with street-smart confidence",
        "Navigates city obstacles with creative problem-solving and style",
        "Expresses urban culture through movement and artistic expression",
    ],
    "Nature & Wildlife": [
        "Displays natural instincts and survival behaviors in the wild habitat",
        "Demonstrates adaptation to the natural environment and seasonal changes",
        "Shows harmony between creature and pristine natural setting",
    ],
    "Human Drama": [
        "Reveals deep emotion through authentic facial expression and body language",
        "Communicates complex feelings through subtle gestural storytelling",
        "Displays human vulnerability and strength in a meaningful moment",
    ],
    "Vehicle Action": [
        "Demonstrates expert vehicle control through technical driving skill",
        "Shows precision and timing in a high-speed competitive situation",
        "Executes a complex maneuver with mechanical understanding and experience",
    ],
    "Adventure & Extreme": [
        "Pushes physical and mental boundaries in a challenging extreme situation",
        "Shows courage and skill in the face of natural dangers and obstacles",
        "Demonstrates the specialized technique required for extreme sports mastery",
    ],
}

PROPS: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Professional sports equipment, team banners, scoreboards",
        "Training apparatus, coaching tools, athletic accessories",
        "Competition markers, timing equipment, safety gear",
    ],
    "Urban & Street": [
        "Street art supplies, urban furniture, city infrastructure",
        "Performance props, music equipment, cultural artifacts",
        "Transportation elements, architectural features, signage",
    ],
    "Nature & Wildlife": [
        "Natural elements like rocks, branches, water features",
        "Scientific equipment for field research and observation",
        "Camping gear, hiking equipment, outdoor survival tools",
    ],
    "Human Drama": [
        "Personal belongings that tell the character's story",
        "Work-related tools and professional equipment",
        "Domestic items that create an intimate atmosphere",
    ],
    "Vehicle Action": [
        "Racing equipment, tools, mechanical parts",
        "Track safety gear, timing devices, communication equipment",
        "Vehicle modifications, performance indicators, technical instruments",
    ],
    "Adventure & Extreme": [
        "Specialized safety equipment, climbing gear, protective elements",
        "Adventure tools, navigation equipment, emergency supplies",
        "Extreme sports apparatus, weather monitoring devices",
    ],
}

AMBIENT_AUDIO: dict[str, list[str]] = {
    "Sports & Athletics": [
        "Stadium crowd noise, whistle sounds, equipment impacts",
        "Training facility acoustics with echo and equipment noise",
        "Outdoor sports sounds with natural environment audio",
    ],
    "Urban & Street": [
        "City traffic, street music, urban construction sounds",
        "Metropolitan ambiance with sirens and crowd noise",
        "Street culture audio with music and conversation",
    ],
    "Nature & Wildlife": [
        "Natural soundscape with wind, water, and animal calls",
        "Wilderness audio with rustling leaves and distant sounds",
        "Ecosystem sounds reflecting natural harmony and seasonal changes",
    ],
    "Human Drama": [
        "Interior acoustics with room tone and household sounds",
        "Workplace ambiance with office equipment and conversation",
        "Domestic environment with familiar everyday audio",
    ],
    "Vehicle Action": [
        "Engine sounds, tire noise, mechanical audio elements",
        "Racing environment with crowd noise and competition audio",
        "Automotive sounds reflecting speed and mechanical precision",
    ],
    "Adventure & Extreme": [
        "Outdoor adventure sounds with wind and natural elements",
        "Extreme sports audio with equipment and environmental noise",
        "Wilderness sounds reflecting challenge and excitement",
    ],
}

TIMES_OF_DAY: list[str] = [
    "dawn",
    "early morning",
    "mid-morning",
    "noon",
    "afternoon",
    "golden hour",
    "dusk",
    "evening",
    "night",
    "late night",
]

LIGHTING: dict[str, list[str]] = {
    "Cinematic": [
        "Dramatic three-point lighting with deep shadows and strong contrast",
        "Golden hour natural lighting with warm practical sources",
        "Professional film lighting with controlled shadows and highlights",
    ],
    "Documentary": [
        "Available light with minimal artificial enhancement for authenticity",
        "Natural lighting that preserves realistic atmosphere",
        "Documentary-style lighting that supports truth and realism",
    ],
    "Commercial": [
        "Polished professional lighting with even coverage and product focus",
        "High-key lighting setup for commercial appeal and clarity",
        "Studio-quality lighting with perfect exposure and color balance",
    ],
    "Artistic": [
        "Creative lighting design with experimental shadows and color temperature",
        "Artistic illumination that supports visual storytelling and mood",
        "Innovative lighting approach with unique angles and creative techniques",
    ],
    "Vintage": [
        "Soft tungsten lighting with gentle halation around highlights",
        "Window light with warm falloff reminiscent of classic film stock",
        "Low-contrast practical lighting with a nostalgic glow",
    ],
    "Modern": [
        "Clean LED key light with crisp, even fill",
        "Minimalist lighting with precise, controlled highlights",
        "Cool daylight-balanced lighting with sleek reflections",
    ],
    "Noir": [
        "Hard low-key lighting with venetian-blind shadow patterns",
        "Single hard source carving deep pools of shadow",
        "Backlit silhouettes with stark rim light and heavy contrast",
    ],
    "Colorful": [
        "Saturated RGB gel lighting with bold color contrasts",
        "Bright high-key lighting with playful colored accents",
        "Neon practical lighting washing the scene in vivid hues",
    ],
}

TONES: dict[str, list[str]] = {
    "Cinematic": ["dramatic and immersive", "epic and heroic", "intimate and emotional"],
    "Documentary": ["authentic and truthful", "observational and respectful", "educational and informative"],
    "Commercial": ["polished and appealing", "energetic and engaging", "professional and trustworthy"],
    "Artistic": ["creative and expressive", "experimental and unique", "visually striking and memorable"],
    "Vintage": ["nostalgic and warm", "timeless and gentle", "wistful and romantic"],
    "Modern": ["sleek and confident", "minimal and precise", "fresh and contemporary"],
    "Noir": ["moody and mysterious", "tense and brooding", "cynical and atmospheric"],
    "Colorful": ["joyful and vibrant", "bold and playful", "energetic and uplifting"],
}

COLOR_PALETTES: dict[str, list[str]] = {
    "Cinematic": [
        "Warm amber and deep blue contrast with rich shadows",
        "Desaturated earth tones with selective color highlights",
        "High contrast black and white with selective golden accents",
    ],
    "Documentary": [
        "Natural color palette preserving authentic environmental tones",
        "Realistic color grading with minimal saturation enhancement",
        "True-to-life colors that support documentary authenticity",
    ],
    "Commercial": [
        "Bright, saturated colors with high energy and appeal",
        "Clean color palette with strong brand-friendly tones",
        "Polished color grading with commercial shine and clarity",
    ],
    "Artistic": [
        "Experimental color treatment with creative artistic vision",
        "Unique color combinations that support visual storytelling",
        "Creative color grading with artistic flair and innovation",
    ],
    "Vintage": [
        "Faded pastels with warm yellowed highlights",
        "Sepia-leaning tones with soft film-stock grain",
        "Muted Kodachrome reds and teals",
    ],
    "Modern": [
        "Neutral whites and greys with a single accent color",
        "Cool steel blues with clean monochrome surfaces",
        "Crisp contemporary palette with balanced neutral tones",
    ],
    "Noir": [
        "Deep monochrome blacks with silver highlights",
        "Near-black shadows with cold desaturated midtones",
        "Black and white with a single blood-red accent",
    ],
    "Colorful": [
        "Vivid primaries with punchy complementary contrasts",
        "Candy-bright pinks, cyans, and yellows",
        "Rainbow spectrum accents against clean white backgrounds",
    ],
}

EFFECT_PHRASES: dict[str, str] = {
    "weather_effects": "dynamic weather effects",
    "dynamic_lighting": "dramatic lighting changes",
    "camera_movement": "fluid camera movement",
}

STYLE_MODIFIERS: dict[str, str] = {
    "Cinematic": "Shot with cinematic production values and dramatic visual storytelling.",
    "Documentary": "Captured with authentic documentary-style cinematography and natural lighting.",
    "Commercial": "Filmed with polished commercial production quality and professional standards.",
    "Artistic": "Created with artistic vision and innovative visual techniques.",
    "Vintage": "Rendered with vintage aesthetics and a classic film look.",
    "Modern": "Presented with a contemporary style and a clean modern look.",
    "Noir": "Framed with noir lighting and dramatic shadows.",
    "Colorful": "Bursting with vibrant colors and a dynamic visual palette.",
}

COMPLEXITY_MODIFIERS: dict[str, str] = {
    "Simple": "Clean, focused composition with a single clear subject.",
    "Medium": "Balanced composition with multiple supporting elements.",
    "Complex": "Intricate composition with multiple layered visual elements and detailed staging.",
}

DURATION_PACING: dict[str, str] = {
    "1-3 seconds": "in a brief, impactful moment",
    "3-5 seconds": "in a quick, decisive action",
    "5-10 seconds": "unfolding over several dramatic seconds",
    "10-15 seconds": "developing through an extended sequence",
    "15-30 seconds": "building through a complete narrative arc",
}
DEFAULT_PACING = "building through a complete narrative arc"

CLOSING_SENTENCE = "Photorealistic quality with stunning detail."


def first_fragment(candidates: Sequence[str]) -> str:
    """Deterministic chooser used for previews."""
    return candidates[0]


def select_fragment(
    table: Mapping[str, Sequence[str]],
    key: str,
    fallback: str,
    choose: Chooser = random.choice,
) -> str:
    """Pick one fragment for ``key``, using the ``fallback`` row when absent.

    A missing fallback row is a programming error and raises KeyError.
    """
    candidates = table.get(key)
    if candidates is None:
        candidates = table[fallback]
    return choose(candidates)
