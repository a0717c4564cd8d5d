# =============================================================================
# core/catalogs.py  —  Per-tool data tables
# =============================================================================
#
# Every AI-assisted tool is the same pipeline (core/pipeline.py) fed with
# different data.  That data lives here:
#
#   *_OPTIONS   GenerationOptions (max output tokens, temperature)
#   *_COUNT     CountBounds (default, maximum) for "how many" arguments
#   *_STYLES …  StyleCatalog (closed category → instruction phrase)
#
# Temperatures follow the tool's purpose: 0.2-0.4 for analysis/translation,
# 0.6-0.8 for creative generation.
#
# The tables are fixed at import time.  Adding a category means adding an
# entry here; nothing reads categories from configuration.
# =============================================================================

from core.models import CountBounds, GenerationOptions, StyleCatalog


# =============================================================================
# Analysis tools  (core/analysis.py)
# =============================================================================
SUMMARIZE_OPTIONS = GenerationOptions(max_tokens=256, temperature=0.3)
SENTIMENT_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.2)
WRITING_TONE_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.3)
IMPROVE_WRITING_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.3)
READABILITY_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.3)
ARGUMENT_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.3)
BIAS_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.3)
EMOTIONAL_TONE_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.3)

IMPROVEMENT_FOCUS = StyleCatalog(
    default="all",
    entries={
        "grammar": "Focus primarily on grammar, punctuation, and syntax corrections.",
        "clarity": "Focus on making the text clearer and easier to understand.",
        "style": "Focus on improving writing style and flow.",
        "conciseness": "Focus on making the text more concise and eliminating redundancy.",
        "all": "Provide comprehensive feedback on grammar, clarity, style, and conciseness.",
    },
)


# =============================================================================
# Creative tools  (core/creative.py)
# =============================================================================
RHYME_OPTIONS = GenerationOptions(max_tokens=100, temperature=0.7)
RHYME_COUNT = CountBounds(default=5, maximum=20)

POEM_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.8)
POEM_STYLES = StyleCatalog(
    default="free verse",
    entries={
        "haiku": "Write a traditional haiku (3 lines, 5-7-5 syllable pattern)",
        "sonnet": "Write a Shakespearean sonnet (14 lines with ABAB CDCD EFEF GG rhyme scheme)",
        "limerick": "Write a humorous limerick (5 lines with AABBA rhyme scheme)",
        "free verse": "Write a free verse poem (no specific rhyme or meter requirements)",
    },
)

STORY_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.7)
STORY_GENRES = StyleCatalog(
    default="adventure",
    entries={
        "mystery": "mystery",
        "romance": "romance",
        "sci-fi": "science fiction",
        "fantasy": "fantasy",
        "horror": "horror",
        "comedy": "comedy",
        "adventure": "adventure",
    },
)

JOKE_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.8)
JOKE_STYLES = StyleCatalog(
    default="clean",
    entries={
        "pun": "Create a clever pun-based joke",
        "one-liner": "Create a short, punchy one-liner joke",
        "knock-knock": "Create a knock-knock joke format",
        "dad-joke": "Create a wholesome, groan-worthy dad joke",
        "clean": "Create a clean, family-friendly joke",
    },
)

METAPHOR_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.7)
METAPHOR_COUNT = CountBounds(default=3, maximum=10)

ACRONYM_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.6)
ACRONYM_MODES = StyleCatalog(
    default="create",
    entries={
        "create": (
            "Create a memorable acronym from this phrase: '{input}'. "
            "Extract the first letter of each significant word."
        ),
        "expand": (
            "Create a meaningful phrase or expansion for the acronym '{input}'. "
            "Make it memorable and relevant."
        ),
    },
)

SLOGAN_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.8)
SLOGAN_COUNT = CountBounds(default=3, maximum=10)
SLOGAN_TONES = StyleCatalog(
    default="professional",
    entries={
        "professional": "professional",
        "playful": "playful",
        "inspirational": "inspirational",
        "urgent": "urgent",
        "friendly": "friendly",
    },
)

HASHTAG_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.6)
HASHTAG_COUNT = CountBounds(default=10, maximum=30)
HASHTAG_PLATFORMS = StyleCatalog(
    default="general",
    entries={
        "twitter": "Focus on trending, concise hashtags suitable for Twitter",
        "instagram": "Include a mix of popular and niche hashtags for Instagram discovery",
        "linkedin": "Create professional hashtags appropriate for LinkedIn",
        "general": "Create versatile hashtags suitable for multiple platforms",
    },
)

ANALOGY_CHAIN_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.7)
ANALOGY_CHAIN_LENGTH = CountBounds(default=3, maximum=7)

ASSOCIATION_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.7)
ASSOCIATION_COUNT = CountBounds(default=8, maximum=20)
ASSOCIATION_TYPES = StyleCatalog(
    default="semantic",
    entries={
        "emotional": "Focus on emotional connections and feelings associated with the word",
        "visual": "Focus on visual imagery and things you might see related to the word",
        "conceptual": "Focus on abstract concepts and ideas related to the word",
        "semantic": "Focus on semantic relationships and meaning-based connections",
    },
)

QUOTE_OPTIONS = GenerationOptions(max_tokens=100, temperature=0.8)
QUOTE_STYLES = StyleCatalog(
    default="inspirational",
    entries={
        "philosophical": "Create a deep, thought-provoking quote with philosophical insight",
        "actionable": "Create a quote that motivates specific action and behavior",
        "uplifting": "Create an uplifting quote that boosts mood and confidence",
        "inspirational": "Create an inspirational quote that motivates and encourages",
    },
)

MEMORY_DEVICE_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.7)
MEMORY_DEVICE_TYPES = StyleCatalog(
    default="acronym",
    entries={
        "rhyme": "Create a memorable rhyme or song to help remember the information",
        "story": "Create a vivid story that incorporates all the elements to remember",
        "visualization": "Create a visual imagery technique to remember the information",
        "acronym": "Create an acronym or mnemonic phrase to remember the information",
    },
)

ALTERNATIVES_OPTIONS = GenerationOptions(max_tokens=180, temperature=0.6)
ALTERNATIVES_COUNT = CountBounds(default=6, maximum=15)
ALTERNATIVE_TYPES = StyleCatalog(
    default="synonyms",
    entries={
        "phrases": "Generate alternative phrases or expressions with similar meaning",
        "approaches": "Generate different approaches or methods for the given concept",
        "solutions": "Generate alternative solutions or ways to address the given challenge",
        "synonyms": "Generate synonymous words with similar meanings but different connotations",
    },
)

CHARACTER_PROFILE_OPTIONS = GenerationOptions(max_tokens=350, temperature=0.7)
CHARACTER_GENRES = StyleCatalog(
    default="contemporary",
    entries={
        "fantasy": "fantasy",
        "sci-fi": "science fiction",
        "contemporary": "contemporary",
        "historical": "historical",
        "mystery": "mystery",
    },
)

PRODUCT_NAME_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.8)
PRODUCT_NAME_COUNT = CountBounds(default=5, maximum=15)
NAMING_STYLES = StyleCatalog(
    default="professional",
    entries={
        "creative": "Create imaginative, unique names that stand out and are memorable",
        "technical": "Create precise, descriptive names that clearly indicate function",
        "playful": "Create fun, catchy names with wordplay or humor",
        "premium": "Create sophisticated, luxury-sounding names that convey quality",
        "professional": "Create professional, trustworthy names suitable for business use",
    },
)

CREATIVE_PROMPT_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.8)
CREATIVE_PROMPT_COUNT = CountBounds(default=3, maximum=10)
CREATIVE_PROMPT_TYPES = StyleCatalog(
    default="writing",
    entries={
        "art": "Create inspiring visual art prompts that spark creativity",
        "photography": "Create photography challenges and creative shooting ideas",
        "music": "Create musical composition or performance prompts",
        "general": "Create general creative prompts suitable for any artistic medium",
        "writing": "Create engaging writing prompts for stories, poems, or creative writing",
    },
)

DIALOGUE_OPTIONS = GenerationOptions(max_tokens=350, temperature=0.7)
DIALOGUE_TONES = StyleCatalog(
    default="friendly",
    entries={
        "friendly": "friendly",
        "tense": "tense",
        "professional": "professional",
        "romantic": "romantic",
        "argumentative": "argumentative",
    },
)

EMAIL_SUBJECT_OPTIONS = GenerationOptions(max_tokens=150, temperature=0.7)
EMAIL_SUBJECT_COUNT = CountBounds(default=5, maximum=15)
EMAIL_TONES = StyleCatalog(
    default="professional",
    entries={
        "urgent": "Create compelling, action-oriented subject lines that convey urgency",
        "friendly": "Create warm, approachable subject lines for casual communication",
        "promotional": "Create attention-grabbing subject lines for marketing emails",
        "informative": "Create clear, descriptive subject lines that set expectations",
        "professional": "Create professional, clear subject lines suitable for business communication",
    },
)

TESTIMONIAL_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.6)
TESTIMONIAL_COUNT = CountBounds(default=3, maximum=8)
TESTIMONIAL_TONES = StyleCatalog(
    default="professional",
    entries={
        "enthusiastic": "Create excited, highly positive testimonials with emotional language",
        "detailed": "Create comprehensive testimonials with specific benefits and outcomes",
        "brief": "Create concise, punchy testimonials that get straight to the point",
        "professional": "Create credible, balanced testimonials with professional language",
    },
)

PERSONA_OPTIONS = GenerationOptions(max_tokens=400, temperature=0.6)
PERSONA_COUNT = CountBounds(default=2, maximum=5)


# =============================================================================
# Learning tools  (core/learning.py)
# =============================================================================
EXPLAIN_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.3)
AUDIENCE_LEVELS = StyleCatalog(
    default="adult",
    entries={
        "child": (
            "You are an educational assistant who explains concepts in simple terms that a "
            "child (ages 5-10) can understand. Use simple words and relatable examples."
        ),
        "teen": (
            "You are an educational assistant who explains concepts for teenagers (ages 13-18). "
            "Use clear language with some technical terms when appropriate."
        ),
        "expert": (
            "You are an expert educator who provides detailed, technical explanations for "
            "professionals and advanced learners."
        ),
        "adult": (
            "You are an educational assistant who explains concepts clearly for general adult "
            "audiences. Use accessible language while being comprehensive."
        ),
    },
)

TRANSLATE_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.2)
DEFAULT_TARGET_LANGUAGE = "English"

QUESTION_OPTIONS = GenerationOptions(max_tokens=250, temperature=0.6)
QUESTION_COUNT = CountBounds(default=5, maximum=15)
QUESTION_TYPES = StyleCatalog(
    default="discussion",
    entries={
        "interview": "Create insightful interview questions that would elicit interesting responses",
        "research": "Create research questions that could guide academic investigation",
        "critical-thinking": "Create questions that promote deep analysis and critical thinking",
        "discussion": "Create engaging discussion questions that stimulate conversation",
    },
)

DEBATE_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.4)
DEBATE_SIDES = StyleCatalog(
    default="both",
    entries={
        "for": "Generate strong arguments supporting this position: {topic}",
        "against": "Generate strong arguments opposing this position: {topic}",
        "both": "Generate balanced arguments both for and against this topic: {topic}",
    },
)

DEFINITION_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.3)
DEFINITION_STYLES = StyleCatalog(
    default="simple",
    entries={
        "academic": "Create a scholarly, precise definition suitable for academic contexts",
        "technical": "Create a detailed technical definition with specific terminology",
        "conversational": "Create a casual, easy-to-understand explanation",
        "simple": "Create a clear, simple definition accessible to general audiences",
    },
)

TUTORIAL_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.4)
SKILL_LEVELS = StyleCatalog(
    default="beginner",
    entries={
        "intermediate": "Assume basic knowledge and focus on building more complex skills",
        "advanced": "Create a comprehensive outline for experienced learners seeking mastery",
        "beginner": "Start with fundamentals and assume no prior knowledge",
    },
)
TUTORIAL_FORMATS = StyleCatalog(
    default="written",
    entries={
        "video": "Structure for video presentation with clear segments and visual elements",
        "interactive": "Include hands-on exercises and practice opportunities",
        "workshop": "Design for group learning with activities and discussions",
        "written": "Structure for written step-by-step instructions",
    },
)

CONVERSATION_STARTER_OPTIONS = GenerationOptions(max_tokens=200, temperature=0.6)
CONVERSATION_STARTER_COUNT = CountBounds(default=5, maximum=15)
CONVERSATION_CONTEXTS = StyleCatalog(
    default="casual",
    entries={
        "networking": "Create professional conversation starters suitable for business networking events",
        "first date": "Create engaging, getting-to-know-you questions for first dates",
        "dinner party": "Create interesting topics that work well for group dinner conversations",
        "interview": "Create thoughtful questions for job interviews or professional meetings",
        "casual": "Create versatile conversation starters for everyday social situations",
    },
)

ICEBREAKER_OPTIONS = GenerationOptions(max_tokens=300, temperature=0.7)
ICEBREAKER_COUNT = CountBounds(default=3, maximum=8)
ICEBREAKER_CONTEXTS = StyleCatalog(
    default="team meeting",
    entries={
        "workshop": "Create interactive icebreakers suitable for learning environments",
        "social event": "Create fun, engaging icebreakers for social gatherings",
        "classroom": "Create educational icebreakers that also facilitate learning",
        "online meeting": "Create virtual-friendly icebreakers that work over video calls",
        "team meeting": "Create professional icebreakers suitable for workplace team meetings",
    },
)
GROUP_SIZES = StyleCatalog(
    default="medium",
    entries={
        "small": "small (3-8 people)",
        "medium": "medium (9-20 people)",
        "large": "large (20+ people)",
    },
)
