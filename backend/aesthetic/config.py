from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": "../.env",
        "extra": "ignore",
        "env_prefix": "",
        "case_sensitive": False,
    }

    # Hugging Face inference (caption + plan models, places365 fallback)
    huggingface_token: str = ""
    huggingface_base_url: str = "https://api-inference.huggingface.co/models"
    caption_model: str = "Salesforce/blip-image-captioning-base"
    plan_model: str = "HuggingFaceH4/zephyr-7b-beta"
    scene_model: str = "zhoubolei/places365-resnet50"

    # Plan provider: "huggingface" or "anthropic"
    plan_provider: str = "huggingface"
    anthropic_api_key: str = ""
    anthropic_plan_model: str = "claude-haiku-4-5-20251001"

    # Vision annotation
    google_vision_api_key: str = ""

    # Room classifier (client side: where to POST; service side: Azure backend)
    room_classifier_url: str = ""
    azure_vision_endpoint: str = ""
    azure_vision_key: str = ""

    # Engine
    request_deadline_seconds: float = 45.0
    http_timeout_seconds: float = 30.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str = ""


settings = Settings()
