import os

from pydantic_settings import BaseSettings, SettingsConfigDict

# Service identity (used by the installer and as fallback event source)
SERVICE_NAME = "TempFolderRemover"
SERVICE_DISPLAY_NAME = "Temp Folder Remover Service"
SERVICE_DESCRIPTION = (
    "Automatically removes files from a specified temporary folder at regular intervals."
)

SETTINGS_FILE_NAME = "appsettings.json"
DEFAULT_POLL_INTERVAL_MINUTES = 5
# Same range as the original 32-bit interval setting
MAX_POLL_INTERVAL_MINUTES = 2**31 - 1

if os.name == "nt":
    DEFAULT_TARGET_FOLDER_PATH = r"C:\TempToClean"
    DEFAULT_LOG_FILE_PATH = r"C:\TempFolderRemover\log.txt"
    DEFAULT_SETTINGS_DIRECTORY = r"C:\TempFolderRemoverSettings"
else:
    DEFAULT_TARGET_FOLDER_PATH = "/var/tmp/temp-to-clean"
    DEFAULT_LOG_FILE_PATH = "/var/log/temp-folder-remover/log.txt"
    DEFAULT_SETTINGS_DIRECTORY = "/etc/temp-folder-remover"


class Settings(BaseSettings):
    # Directory holding the external appsettings.json document
    settings_directory: str = DEFAULT_SETTINGS_DIRECTORY

    # Console / fallback logging
    log_level: str = "INFO"

    # Host adapter
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(env_file="settings.env", extra="ignore")
