# =============================================================================
# core/creative.py  —  AI-assisted creative generation tools
# =============================================================================
#
# Tools that WRITE something new: rhymes, poems, stories, jokes, slogans,
# names, prompts, dialogue, marketing copy.  They run warm (temperature
# 0.6-0.8); limits and category tables are in core/catalogs.py.
#
# CONVENTIONS (shared by every function below):
#   - Blank required text → a fixed "No ... provided" message, no backend call.
#   - Counts outside [1, max] → the tool's default count.
#   - Categories go through a StyleCatalog: the PROMPT uses the resolved key,
#     the LABEL echoes exactly what the caller passed (upper-cased).
# =============================================================================

from core import catalogs
from core.pipeline import CompletionBackend, generate, is_blank


async def generate_rhyme(backend: CompletionBackend, word: str, count: int = 5) -> str:
    if is_blank(word):
        return "No word provided for rhyme generation."

    count = catalogs.RHYME_COUNT.clamp(count)
    return await generate(
        backend,
        persona=(
            "You are a creative writing assistant specializing in wordplay and rhymes. "
            "Generate real English words that rhyme with the given word."
        ),
        request=f"Generate {count} words that rhyme with '{word}'. Return only the rhyming words, separated by commas.",
        options=catalogs.RHYME_OPTIONS,
        label=f"Rhymes for '{word}'",
    )


async def generate_poem(backend: CompletionBackend, theme: str, style: str = "free verse") -> str:
    if is_blank(theme):
        return "No theme provided for poem generation."

    style_key = catalogs.POEM_STYLES.key_for(style)
    style_instruction = catalogs.POEM_STYLES.instruction(style)
    return await generate(
        backend,
        persona=f"You are a creative poet. {style_instruction} based on the given theme.",
        request=f"Write a {style_key} poem about: {theme}",
        options=catalogs.POEM_OPTIONS,
        label=f"{style.upper()} - {theme}",
        separator=":\n",
    )


async def generate_story(
    backend: CompletionBackend,
    character: str,
    setting: str,
    genre: str = "adventure",
) -> str:
    if is_blank(character, setting):
        return "Both character and setting must be provided for story generation."

    genre_name = catalogs.STORY_GENRES.instruction(genre)
    return await generate(
        backend,
        persona=(
            f"You are a creative storyteller specializing in {genre_name} stories. Write engaging, "
            "well-structured short stories with clear beginning, middle, and end."
        ),
        request=f"Write a short {genre_name} story featuring {character} in {setting}. Keep it to about 150-200 words.",
        options=catalogs.STORY_OPTIONS,
        label=f"{genre.upper()} Story - {character} in {setting}",
        separator=":\n",
    )


async def generate_joke(backend: CompletionBackend, topic: str, style: str = "clean") -> str:
    if is_blank(topic):
        return "No topic provided for joke generation."

    style_key = catalogs.JOKE_STYLES.key_for(style)
    style_instruction = catalogs.JOKE_STYLES.instruction(style)
    return await generate(
        backend,
        persona=(
            "You are a comedian specializing in clean, family-friendly humor. "
            f"{style_instruction} about the given topic."
        ),
        request=f"Tell me a {style_key} joke about: {topic}",
        options=catalogs.JOKE_OPTIONS,
        label=f"{style.upper()} Joke about {topic}",
    )


async def create_metaphors(backend: CompletionBackend, concept: str, count: int = 3) -> str:
    if is_blank(concept):
        return "No concept provided for metaphor generation."

    count = catalogs.METAPHOR_COUNT.clamp(count)
    return await generate(
        backend,
        persona=(
            "You are a creative writing expert skilled in crafting vivid metaphors and analogies. "
            "Create original, meaningful comparisons that help illuminate concepts."
        ),
        request=(
            f"Create {count} different metaphors or analogies to explain the concept of '{concept}'. "
            "Make them vivid and relatable."
        ),
        options=catalogs.METAPHOR_OPTIONS,
        label=f"Metaphors for '{concept}'",
    )


async def create_acronym(backend: CompletionBackend, input_text: str, mode: str = "create") -> str:
    """Turn a phrase into an acronym ("create") or an acronym into a phrase ("expand")."""
    if is_blank(input_text):
        return "No input provided for acronym creation/expansion."

    request = catalogs.ACRONYM_MODES.instruction(mode).format(input=input_text)
    return await generate(
        backend,
        persona=(
            "You are skilled at creating memorable acronyms and meaningful phrase expansions. "
            "Focus on clarity and memorability."
        ),
        request=request,
        options=catalogs.ACRONYM_OPTIONS,
        label=f"Acronym {mode}",
    )


async def generate_slogan(
    backend: CompletionBackend,
    subject: str,
    tone: str = "professional",
    count: int = 3,
) -> str:
    if is_blank(subject):
        return "No subject provided for slogan generation."

    count = catalogs.SLOGAN_COUNT.clamp(count)
    tone_name = catalogs.SLOGAN_TONES.instruction(tone)
    return await generate(
        backend,
        persona=(
            f"You are a creative marketing expert. Create catchy, memorable slogans with a {tone_name} "
            "tone. Keep them concise and impactful."
        ),
        request=f"Create {count} {tone_name} slogans for: {subject}",
        options=catalogs.SLOGAN_OPTIONS,
        label=f"{tone.upper()} Slogans for {subject}",
    )


async def generate_hashtags(
    backend: CompletionBackend,
    content: str,
    platform: str = "general",
    count: int = 10,
) -> str:
    if is_blank(content):
        return "No content provided for hashtag generation."

    count = catalogs.HASHTAG_COUNT.clamp(count)
    platform_key = catalogs.HASHTAG_PLATFORMS.key_for(platform)
    guidance = catalogs.HASHTAG_PLATFORMS.instruction(platform)
    return await generate(
        backend,
        persona=f"You are a social media expert. {guidance}. Generate relevant, searchable hashtags.",
        request=f'Generate {count} hashtags for this content on {platform_key}: "{content}"',
        options=catalogs.HASHTAG_OPTIONS,
        label=f"{platform.upper()} Hashtags for content",
    )


async def create_analogy_chain(backend: CompletionBackend, concept: str, chain_length: int = 3) -> str:
    if is_blank(concept):
        return "No concept provided for analogy chain creation."

    chain_length = catalogs.ANALOGY_CHAIN_LENGTH.clamp(chain_length)
    return await generate(
        backend,
        persona=(
            "You are an expert at explaining complex concepts through progressive analogies. "
            "Create a chain of analogies that build upon each other, starting simple and becoming "
            "more sophisticated."
        ),
        request=(
            f"Create a chain of {chain_length} analogies to explain '{concept}', starting with the "
            "simplest comparison and progressively building complexity."
        ),
        options=catalogs.ANALOGY_CHAIN_OPTIONS,
        label=f"Analogy Chain for '{concept}'",
    )


async def create_word_associations(
    backend: CompletionBackend,
    word: str,
    count: int = 8,
    association_type: str = "semantic",
) -> str:
    if is_blank(word):
        return "No word provided for association generation."

    count = catalogs.ASSOCIATION_COUNT.clamp(count)
    type_key = catalogs.ASSOCIATION_TYPES.key_for(association_type)
    type_instruction = catalogs.ASSOCIATION_TYPES.instruction(association_type)
    return await generate(
        backend,
        persona=f"You are an expert in linguistics and cognitive associations. {type_instruction}.",
        request=f"Generate {count} {type_key} word associations for: '{word}'",
        options=catalogs.ASSOCIATION_OPTIONS,
        label=f"{association_type.upper()} Associations for '{word}'",
    )


async def generate_motivational_quote(
    backend: CompletionBackend,
    theme: str,
    style: str = "inspirational",
) -> str:
    if is_blank(theme):
        return "No theme provided for motivational quote generation."

    style_key = catalogs.QUOTE_STYLES.key_for(style)
    style_instruction = catalogs.QUOTE_STYLES.instruction(style)
    return await generate(
        backend,
        persona=(
            f"You are a wise motivational speaker. {style_instruction} about the given theme. "
            "Make it memorable and impactful."
        ),
        request=f"Create a {style_key} motivational quote about: {theme}",
        options=catalogs.QUOTE_OPTIONS,
        label=f"{style.upper()} Quote about {theme}",
    )


async def create_memory_device(
    backend: CompletionBackend,
    information: str,
    device_type: str = "acronym",
) -> str:
    if is_blank(information):
        return "No information provided for memory device creation."

    type_key = catalogs.MEMORY_DEVICE_TYPES.key_for(device_type)
    type_instruction = catalogs.MEMORY_DEVICE_TYPES.instruction(device_type)
    return await generate(
        backend,
        persona=f"You are an expert in memory techniques and learning strategies. {type_instruction}.",
        request=f"Create a {type_key} memory device for: {information}",
        options=catalogs.MEMORY_DEVICE_OPTIONS,
        label=f"{device_type.upper()} Memory Device",
    )


async def generate_alternatives(
    backend: CompletionBackend,
    input_text: str,
    alternative_type: str = "synonyms",
    count: int = 6,
) -> str:
    if is_blank(input_text):
        return "No input provided for alternative generation."

    count = catalogs.ALTERNATIVES_COUNT.clamp(count)
    type_key = catalogs.ALTERNATIVE_TYPES.key_for(alternative_type)
    type_instruction = catalogs.ALTERNATIVE_TYPES.instruction(alternative_type)
    return await generate(
        backend,
        persona=f"You are a linguistic expert skilled in finding alternatives. {type_instruction}.",
        request=f"Generate {count} {type_key} for: '{input_text}'",
        options=catalogs.ALTERNATIVES_OPTIONS,
        label=f"{alternative_type.upper()} for '{input_text}'",
    )


async def create_character_profile(
    backend: CompletionBackend,
    character: str,
    genre: str = "contemporary",
) -> str:
    if is_blank(character):
        return "No character information provided for profile creation."

    genre_name = catalogs.CHARACTER_GENRES.instruction(genre)
    return await generate(
        backend,
        persona=(
            f"You are a creative writing expert specializing in {genre_name} character development. "
            "Create detailed, believable character profiles with personality, background, "
            "motivations, and distinctive traits."
        ),
        request=(
            f"Create a detailed character profile for {character} in a {genre_name} setting. "
            "Include personality traits, background, motivations, strengths, weaknesses, and "
            "distinctive characteristics."
        ),
        options=catalogs.CHARACTER_PROFILE_OPTIONS,
        label=f"{genre.upper()} Character Profile - {character}",
    )


async def generate_product_names(
    backend: CompletionBackend,
    product_description: str,
    naming_style: str = "professional",
    count: int = 5,
) -> str:
    if is_blank(product_description):
        return "No product description provided for name generation."

    count = catalogs.PRODUCT_NAME_COUNT.clamp(count)
    style_key = catalogs.NAMING_STYLES.key_for(naming_style)
    style_instruction = catalogs.NAMING_STYLES.instruction(naming_style)
    return await generate(
        backend,
        persona=f"You are a branding expert specializing in product naming. {style_instruction}.",
        request=f"Generate {count} {style_key} names for this product: {product_description}",
        options=catalogs.PRODUCT_NAME_OPTIONS,
        label=f"{naming_style.upper()} Product Names",
    )


async def generate_creative_prompts(
    backend: CompletionBackend,
    prompt_type: str = "writing",
    theme: str = "",
    count: int = 3,
) -> str:
    """Creative prompts.  Nothing is required; ``theme`` is optional."""
    count = catalogs.CREATIVE_PROMPT_COUNT.clamp(count)
    type_key = catalogs.CREATIVE_PROMPT_TYPES.key_for(prompt_type)
    type_instruction = catalogs.CREATIVE_PROMPT_TYPES.instruction(prompt_type)
    theme_clause = "" if is_blank(theme) else f" with a {theme} theme"
    return await generate(
        backend,
        persona=f"You are a creativity coach. {type_instruction}. Make them inspiring and thought-provoking.",
        request=f"Generate {count} {type_key} prompts{theme_clause}.",
        options=catalogs.CREATIVE_PROMPT_OPTIONS,
        label=f"{prompt_type.upper()} Creative Prompts{theme_clause}",
    )


async def simulate_dialogue(
    backend: CompletionBackend,
    character1: str,
    character2: str,
    scenario: str,
    tone: str = "friendly",
) -> str:
    if is_blank(character1, character2, scenario):
        return "Character descriptions and scenario must be provided for dialogue simulation."

    tone_name = catalogs.DIALOGUE_TONES.instruction(tone)
    return await generate(
        backend,
        persona=(
            "You are a dialogue expert who creates realistic conversations. Write natural dialogue "
            f"that reflects each character's personality and the {tone_name} tone of the situation."
        ),
        request=(
            f"Create a {tone_name} dialogue between {character1} and {character2} about: {scenario}. "
            "Show 4-6 exchanges between them."
        ),
        options=catalogs.DIALOGUE_OPTIONS,
        label=f"{tone.upper()} Dialogue - {character1} & {character2}",
    )


async def generate_email_subjects(
    backend: CompletionBackend,
    email_purpose: str,
    tone: str = "professional",
    count: int = 5,
) -> str:
    if is_blank(email_purpose):
        return "No email purpose provided for subject line generation."

    count = catalogs.EMAIL_SUBJECT_COUNT.clamp(count)
    tone_key = catalogs.EMAIL_TONES.key_for(tone)
    tone_instruction = catalogs.EMAIL_TONES.instruction(tone)
    return await generate(
        backend,
        persona=f"You are an email marketing expert. {tone_instruction}. Keep them concise and compelling.",
        request=f"Generate {count} {tone_key} email subject lines for: {email_purpose}",
        options=catalogs.EMAIL_SUBJECT_OPTIONS,
        label=f"{tone.upper()} Email Subjects",
    )


async def generate_testimonials(
    backend: CompletionBackend,
    product_service: str,
    customer_type: str,
    tone: str = "professional",
    count: int = 3,
) -> str:
    if is_blank(product_service, customer_type):
        return "Both product/service and customer type must be provided for testimonial generation."

    count = catalogs.TESTIMONIAL_COUNT.clamp(count)
    tone_key = catalogs.TESTIMONIAL_TONES.key_for(tone)
    tone_instruction = catalogs.TESTIMONIAL_TONES.instruction(tone)
    return await generate(
        backend,
        persona=(
            f"You are a marketing copywriter. {tone_instruction}. Make them sound authentic and "
            "believable, mentioning specific benefits."
        ),
        request=f"Generate {count} {tone_key} testimonials for {product_service} from {customer_type} customers.",
        options=catalogs.TESTIMONIAL_OPTIONS,
        label=f"{tone.upper()} Testimonials for {product_service}",
    )


async def create_user_personas(
    backend: CompletionBackend,
    product: str,
    demographic: str,
    count: int = 2,
) -> str:
    if is_blank(product, demographic):
        return "Both product description and demographic information required for persona creation."

    count = catalogs.PERSONA_COUNT.clamp(count)
    return await generate(
        backend,
        persona=(
            "You are a UX researcher and marketing expert. Create detailed, realistic user personas "
            "with demographics, goals, pain points, behaviors, and motivations."
        ),
        request=(
            f"Create {count} user personas for {product} targeting {demographic}. Include name, age, "
            "occupation, goals, challenges, and relevant characteristics."
        ),
        options=catalogs.PERSONA_OPTIONS,
        label=f"User Personas for {product} ({demographic})",
    )
