class Constants:
    LLM = "llm"
    TEMPERATURE = "temperature"
    MODEL = "model"
    PROVIDER = "provider"
    PROVIDERS = "providers"
    API_KEY_ENV = "api_key_env"
    # Optional: for Azure / custom endpoints
    API_BASE_ENV = "api_base_env"
    API_VERSION = "api_version"

    ROUTER = "router"
    CONFIDENCE_THRESHOLDS = "confidence_thresholds"
    CACHE = "cache"
    VISION = "vision"
    LOGGING = "logging"
    PATHS = "paths"
