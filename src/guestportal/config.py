from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3030
    debug: bool = False
    database_url: str  # MongoDB URL including database name, e.g. mongodb://localhost/guestportal
    controller_url: str  # Base URL of the UniFi controller, e.g. https://192.168.1.1
    controller_site: str = "default"
    controller_username: str
    controller_password: str
    guest_duration: int = 480  # Minutes of network access granted per guest
    disable_tls: bool = False  # Skip certificate validation for self-signed controllers on a trusted LAN
    controller_timeout: float = 10.0  # Seconds per outbound controller request
    frontend_path: str = "./dist"  # Directory holding index.html, success.html and static assets
    page_title: str = "Guest Portal"
    pending_max_age: int = 3600  # Seconds before an unfinished guest login expires
    pending_purge_interval: int = 30  # Seconds between expiry sweeps

    model_config = {
        "env_file": [".env"],
        "env_prefix": "GUESTPORTAL_",
        "extra": "ignore",
    }
