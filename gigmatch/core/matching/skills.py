"""Skill extraction from free text (job descriptions, worker narratives)."""

import re

from pydantic import TypeAdapter

from ...integrations.generation import TextGenerator, generation_unavailable
from ...observability.logger import get_logger
from ..models.base import RemoteResult

logger = get_logger(__name__)

# Keyword -> skills implied by it, matched as lowercase substrings
SKILL_TAXONOMY: dict[str, list[str]] = {
    # Culinary
    "hotel": ["Hospitality", "Customer Service", "Cleaning", "Housekeeping"],
    "restaurant": ["Food Service", "Customer Service", "Kitchen Work", "Hospitality"],
    "cook": ["Cooking", "Food Preparation", "Kitchen Management", "Recipe Knowledge"],
    "chef": ["Cooking", "Food Preparation", "Kitchen Management", "Recipe Knowledge"],
    "khansama": ["Cooking", "Food Preparation", "Kitchen Management"],
    "kitchen": ["Cooking", "Food Preparation", "Kitchen Work"],
    "baking": ["Baking", "Food Preparation", "Cooking"],
    "waiter": ["Customer Service", "Communication", "Food Service", "Hospitality"],
    "steward": ["Hospitality", "Customer Service", "Food Service"],
    # Cleaning / Domestic
    "clean": ["Cleaning", "Housekeeping", "Maintenance", "Attention to Detail"],
    "maid": ["Housekeeping", "Cleaning", "Domestic Work"],
    "housekeeper": ["Housekeeping", "Cleaning", "Domestic Work"],
    "sweeper": ["Cleaning", "Sanitation", "Maintenance"],
    "janitor": ["Cleaning", "Maintenance", "Sanitation"],
    # Driving / Transport
    "driver": ["Driving", "Navigation", "Vehicle Maintenance", "Time Management"],
    "chauffeur": ["Driving", "Navigation", "Customer Service"],
    "delivery": ["Delivery", "Logistics", "Customer Service", "Time Management"],
    # Security
    "security": ["Security", "Surveillance", "Safety", "Communication"],
    "guard": ["Security", "Surveillance", "Safety"],
    "watchman": ["Security", "Surveillance", "Safety"],
    "chowkidar": ["Security", "Surveillance", "Safety"],
    "bouncer": ["Security", "Crowd Management", "Safety"],
    # Skilled trades
    "carpenter": ["Carpentry", "Woodwork", "Tool Handling", "Construction"],
    "woodwork": ["Carpentry", "Woodwork", "Furniture Making"],
    "plumber": ["Plumbing", "Pipe Fitting", "Maintenance", "Problem Solving"],
    "pipe fitting": ["Plumbing", "Pipe Fitting", "Maintenance"],
    "electrician": ["Electrical Work", "Wiring", "Troubleshooting", "Safety"],
    "wireman": ["Electrical Work", "Wiring", "Safety"],
    "painter": ["Painting", "Color Mixing", "Surface Preparation", "Decoration"],
    "mechanic": ["Mechanical Work", "Vehicle Repair", "Troubleshooting", "Tool Handling"],
    "fitter": ["Mechanical Work", "Tool Handling", "Maintenance"],
    "welder": ["Welding", "Fabrication", "Tool Handling"],
    "mason": ["Construction", "Masonry", "Tool Handling"],
    # Office / Admin / IT
    "computer": ["Computer Skills", "Data Entry", "Office Work", "Technology"],
    "typing": ["Data Entry", "Computer Skills", "Office Work"],
    "clerk": ["Data Entry", "Office Work", "Computer Skills"],
    "peon": ["Office Work", "Errand Running", "Maintenance"],
    "office boy": ["Office Work", "Errand Running"],
    # Teaching / Training
    "teaching": ["Teaching", "Communication", "Patience", "Subject Knowledge"],
    "tutor": ["Teaching", "Communication", "Subject Knowledge"],
    "trainer": ["Teaching", "Communication", "Training"],
    "coach": ["Teaching", "Coaching", "Communication"],
    # Sales / Retail
    "sales": ["Sales", "Communication", "Customer Relations", "Negotiation"],
    "shop": ["Retail", "Customer Service", "Sales", "Inventory Management"],
    # Healthcare
    "nurse": ["Healthcare", "Patient Care", "Medical Assistance"],
    "caretaker": ["Healthcare", "Patient Care", "Senior Care"],
    # Beauty & Wellness
    "beautician": ["Beauty & Wellness", "Grooming", "Salon Work"],
    "hairdresser": ["Beauty & Wellness", "Hair Styling", "Grooming"],
    "salon": ["Beauty & Wellness", "Hair Styling", "Grooming"],
    # Gardening
    "gardener": ["Gardening", "Landscaping", "Plant Care", "Maintenance"],
    # Photography
    "photographer": ["Photography", "Videography", "Camera Operation"],
    "cameraman": ["Photography", "Videography", "Camera Operation"],
}

CONTEXT_KEYWORDS: dict[str, str] = {
    "worked": "Experience",
    "experience": "Experience",
    "manage": "Management",
    "supervisor": "Management",
    "team": "Teamwork",
    "group": "Teamwork",
}

SKILL_EXTRACTION_SYSTEM = (
    "You are a skill extraction assistant for a hyperlocal job platform in India. "
    "Extract professional skills from job descriptions or worker experience text. "
    'Map regional synonyms to canonical names (e.g. "chef/cook/khansama" = Cooking, '
    '"guard/watchman/chowkidar" = Security, "maid/domestic help" = Housekeeping). '
    "Return ONLY a valid JSON array of skill name strings - no markdown, no explanation."
)

# Only the first 500 characters are sent to the model
AI_INPUT_CHARS = 500

_JSON_ARRAY = re.compile(r"\[[\s\S]*?\]")
_skill_list = TypeAdapter(list[str])


def extract_skills(description: str) -> list[str]:
    """Extract skills from text with the keyword taxonomy.

    Args:
        description: Free text

    Returns:
        Deduplicated skills in first-seen order
    """
    lower = description.lower()
    extracted: dict[str, None] = {}

    for keyword, skills in SKILL_TAXONOMY.items():
        if keyword in lower:
            extracted.update(dict.fromkeys(skills))

    for keyword, skill in CONTEXT_KEYWORDS.items():
        if keyword in lower:
            extracted[skill] = None

    return list(extracted)


async def _attempt_ai_skills(
    description: str, generator: TextGenerator | None
) -> RemoteResult[list[str]]:
    if generation_unavailable(generator):
        return RemoteResult.unavailable("no text generator configured")

    prompt = (
        "Extract professional skills from the following text. Return ONLY a JSON array of "
        f'skill names.\nText: "{description[:AI_INPUT_CHARS]}"'
    )
    try:
        raw = await generator.generate(prompt, system=SKILL_EXTRACTION_SYSTEM)
        match = _JSON_ARRAY.search(raw)
        if not match:
            return RemoteResult.unavailable("no JSON array in completion")
        skills = _skill_list.validate_json(match.group(0))
    except Exception as e:
        logger.warning("skill_extraction_failed", error=str(e))
        return RemoteResult.unavailable(str(e))

    return RemoteResult.of([s.strip() for s in skills if s.strip()])


async def extract_skills_with_ai(description: str, generator: TextGenerator | None = None) -> list[str]:
    """Extract skills with the text generator, falling back to the taxonomy."""
    result = await _attempt_ai_skills(description, generator)
    return result.or_else(lambda: extract_skills(description))
