from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Window Configurator"
    SHOP_NAME: str = "Deraza Konfigurator"
    SHOP_PHONE: str = ""
    SHOP_EMAIL: str = ""

    # Preview canvas bounds in pixels
    CANVAS_MAX_WIDTH_PX: int = 420
    CANVAS_MAX_HEIGHT_PX: int = 520

    CURRENCY_LABEL: str = "so'm"
    ORDER_NOTICE: str = "Demo: buyurtma qabul qilinmadi — bu faqat prototip."

    class Config:
        env_file = ".env"


settings = Settings()
