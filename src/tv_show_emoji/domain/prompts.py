"""Prompt templates for emoji suggestion."""

from tv_show_emoji.domain.models import PromptRequest

SUBJECT_INSTRUCTIONS: dict[str, str] = {
    "overall": (
        "Consider the show holistically: its iconic characters, memorable plot points, "
        "central themes, overall mood, setting, and what makes it unique. "
        "Capture the essence of the entire show."
    ),
    "character": (
        "Focus on the main characters, their personalities, defining traits, character arcs, "
        "and memorable quirks. Think about what makes each character iconic."
    ),
    "relationship": (
        "Focus on key relationships between characters: friendships, romances, rivalries, "
        "family dynamics, and evolving connections throughout the show."
    ),
    "plot": (
        "Focus on major plot points, story arcs, narrative structure, plot twists, "
        "and the overall storytelling approach."
    ),
    "setting": (
        "Focus on where the show takes place: the locations, time period, physical environment, "
        "and how the setting influences the story."
    ),
    "theme": (
        "Focus on the underlying themes and messages: what the show explores about human nature, "
        "society, morality, or life."
    ),
    "episode": (
        "Focus on memorable individual episodes: iconic moments, standout episodes, "
        "episode structure, and episodic storytelling elements."
    ),
    "season": (
        "Focus on seasonal arcs, how the show evolves across seasons, seasonal themes, "
        "and the progression of the overall narrative."
    ),
    "mood": (
        "Focus on the emotional atmosphere and tone: whether it's dark, comedic, tense, "
        "heartwarming, suspenseful, or whimsical."
    ),
    "location": (
        "Focus on specific iconic locations within the show: recurring settings, "
        "memorable places, and location-based scenes."
    ),
    "genre": (
        "Focus on the show's genre elements: what makes it a drama, comedy, thriller, sci-fi, etc., "
        "and how it uses or subverts genre conventions."
    ),
    "conflict": (
        "Focus on the central conflicts and tensions: internal struggles, external battles, "
        "moral dilemmas, and antagonistic forces."
    ),
    "emotion": (
        "Focus on the emotional journey: what feelings the show evokes, emotional highs and lows, "
        "and the emotional resonance."
    ),
    "symbol": (
        "Focus on recurring symbols, motifs, visual metaphors, and symbolic elements "
        "that carry deeper meaning in the show."
    ),
}

# Free-form subjects entered interactively have no dedicated paragraph.
CUSTOM_SUBJECT_INSTRUCTION = (
    'Focus on the "{subject}" of the show: how it shows up on screen, '
    "why it matters to the story, and what makes it memorable."
)

EMOJI_PROMPT_TEMPLATE = """You are an expert at analyzing TV shows and selecting emojis that capture their essence.

TV Show: "{show}"
Subject: {subject}
Task: {instruction}

Please suggest {count_phrase} that best {verb} the {subject} of "{show}".

IMPORTANT FORMAT REQUIREMENTS:
- Provide exactly {count_phrase}
- For each emoji, provide a single-sentence explanation (maximum 50 words)
- Use this exact format for each emoji:

[emoji] - [one-sentence explanation]

Example format:
💀 - Death and mortality are central themes explored through the protagonist's terminal diagnosis and transformation.
🔬 - Chemistry is both the literal profession and metaphor for transformation throughout the series.

Now provide your {count_phrase} for "{show}" focused on {subject}:"""


def pluralize_emoji(count: int) -> str:
    """``1 emoji`` / ``N emojis``."""
    return f"{count} emoji" if count == 1 else f"{count} emojis"


def subject_instruction(subject: str) -> str:
    instruction = SUBJECT_INSTRUCTIONS.get(subject)
    if instruction is None:
        return CUSTOM_SUBJECT_INSTRUCTION.format(subject=subject)
    return instruction


def build_prompt(show: str, subject: str, count: int) -> str:
    """Render the instruction sent to the model. Same inputs, same string."""
    return EMOJI_PROMPT_TEMPLATE.format(
        show=show,
        subject=subject,
        instruction=subject_instruction(subject),
        count_phrase=pluralize_emoji(count),
        verb="represents" if count == 1 else "represent",
    )


def build_prompt_for(request: PromptRequest) -> str:
    return build_prompt(request.show, request.subject, request.count)
