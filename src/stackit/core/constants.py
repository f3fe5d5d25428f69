"""Constants and configuration values for StackIt AI."""

# Generation Constants
class GenerationConstants:
    """Fixed request configuration for the generateContent endpoint."""
    
    TEMPERATURE = 0.7
    TOP_P = 0.95
    MAX_OUTPUT_TOKENS = 2048
    CANDIDATE_COUNT = 1
    
    SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"
    SAFETY_CATEGORIES = [
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    ]
    
    API_KEY_HEADER = "X-goog-api-key"
    RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)

# Prompt Constants
class PromptConstants:
    """Constants for prompts and result limits."""
    
    # Prompt Versions (for cache invalidation)
    PROMPT_VERSION = "v1.0"
    
    # Response Limits
    MAX_SUGGESTIONS = 5
    MAX_TAGS = 5
    MAX_LIST_ITEMS = 5  # reasons, issues, changes, recommendations, topics
    MAX_RELATED_TOPICS = 3
    MAX_INSIGHT_TITLES = 10  # recent question titles sent to the model

# Score Constants
class ScoreConstants:
    """Score bounds and defaults used while normalizing model output."""
    
    MIN_SCORE = 0.0
    MAX_SCORE = 100.0
    
    # Defaults for missing or invalid fields
    CLARITY_DEFAULT = 75
    COMPLETENESS_DEFAULT = 80
    QUALITY_DEFAULT = 75
    READABILITY_DEFAULT = 80
    TECHNICAL_DEPTH_DEFAULT = 70
    IMPROVEMENT_DEFAULT = 85
    SPAM_CONFIDENCE_DEFAULT = 0
    MODERATION_CONFIDENCE_DEFAULT = 90
    PLATFORM_HEALTH_DEFAULT = 85
    
    # Keyword heuristic for unparsable spam verdicts
    HEURISTIC_SPAM_CONFIDENCE = 75
    HEURISTIC_CLEAN_CONFIDENCE = 25
    SPAM_KEYWORDS = ["spam", "promotional", "marketing"]
    
    # Confidence band for a genuine answer suggestion
    ANSWER_CONFIDENCE_RANGE = (85, 95)
    CHAT_CONFIDENCE_RANGE = (90, 100)

# Mock Data Constants
class MockDataConstants:
    """Ranges for randomized mock results (low, high)."""
    
    CLARITY_RANGE = (60, 100)
    COMPLETENESS_RANGE = (70, 100)
    QUALITY_RANGE = (75, 100)
    READABILITY_RANGE = (80, 100)
    TECHNICAL_DEPTH_RANGE = (70, 100)
    ANSWER_CONFIDENCE_RANGE = (70, 100)
    IMPROVEMENT_RANGE = (80, 100)
    CHAT_CONFIDENCE = 50  # model returned nothing
    CHAT_ERROR_CONFIDENCE = 85  # call raised, tips reply
    
    MOCK_SUGGESTIONS = [
        "Consider adding code examples to illustrate your problem",
        "Include what you've already tried to solve this issue",
        "Specify your development environment and versions",
    ]

# Tag Constants
class TagConstants:
    """Closed tag vocabularies offered to the model."""
    
    # Vocabulary for question analysis
    ANALYSIS_TAGS = [
        "JavaScript", "React", "TypeScript", "CSS", "HTML", "Node.js", "Python",
        "Java", "C++", "Career", "Mental Health", "Debugging", "Performance",
        "Best Practices", "API", "Database", "Frontend", "Backend", "DevOps",
        "Security", "Testing", "Mobile", "AI", "Machine Learning", "Data Science",
        "Web Development", "Software Engineering", "Algorithms", "Data Structures",
    ]
    
    # Vocabulary for standalone tag generation
    EXTENDED_TAGS = ANALYSIS_TAGS + [
        "UI/UX", "Cloud Computing", "Docker", "Git", "Linux", "Windows", "macOS",
        "iOS", "Android", "Vue.js", "Angular", "PHP", "Ruby", "Go", "Rust", "Swift",
        "Kotlin", "C#", ".NET", "Spring", "Django", "Flask", "Express", "MongoDB",
        "PostgreSQL", "MySQL", "Redis", "AWS", "Azure", "GCP", "Firebase",
        "GraphQL", "REST", "Microservices", "Agile", "Scrum",
    ]
    
    # Keyword-matched when the model is unavailable
    FALLBACK_TAGS = [
        "JavaScript", "React", "TypeScript", "CSS", "HTML", "Node.js",
        "Python", "Career", "Mental Health", "Debugging", "Performance",
        "Best Practices", "API", "Database", "Frontend", "Backend",
    ]
    DEFAULT_TAG_COUNT = 3
    
    RELATED_TOPIC_KEYWORDS = [
        "React", "JavaScript", "TypeScript", "CSS", "HTML", "Node.js", "API", "Database",
    ]

# Fallback Payload Constants
class FallbackConstants:
    """Canned payloads returned when the model cannot be used."""
    
    DEFAULT_CHANGES = [
        "Improved clarity and structure",
        "Enhanced technical details",
        "Better formatting and organization",
    ]
    MOCK_CHANGES = [
        "Improved clarity and structure",
        "Added technical details and examples",
        "Enhanced readability with proper formatting",
        "Included best practices and considerations",
    ]
    
    ANSWER_SOURCES = ["Gemini AI", "Best Practices", "Official Documentation"]
    MOCK_ANSWER_SOURCES = ["Documentation", "Best Practices", "Community Knowledge"]
    MOCK_CODE_EXAMPLES = ["const solution = () => { return result; };"]
    MOCK_RELATED_TOPICS = ["Best Practices", "Performance", "Testing"]
    
    TRENDING_TOPICS = ["JavaScript", "React", "Career"]
    QUALITY_TRENDS = "Questions are showing good technical depth"
    USER_ENGAGEMENT = "Active community participation"
    INSIGHT_RECOMMENDATIONS = [
        "Encourage more detailed questions",
        "Promote expert participation",
        "Improve response times",
    ]
    
    SPAM_HEURISTIC_REASON = "Detected promotional content"
    UNFORMATTABLE_HTML = "<p>Unable to format content</p>"
    DEFAULT_IMPROVED_TITLE = "How to solve this problem?"
    CHAT_NO_REPLY = "I'm having trouble generating a response right now. Could you try asking your question again?"
    CHAT_UNUSABLE_REPLY = "I'm having trouble generating a proper response. Could you try rephrasing your question?"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    CONFIG_FILE = ".env.example"  # configuration template file
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CACHE_KEY_LENGTH = 8  # length of cache key for logging
