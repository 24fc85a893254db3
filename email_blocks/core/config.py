"""
Configuration — variables d'environnement lues au chargement du module.

EMAIL_BLOCKS_MAX_NESTING    profondeur max des conteneurs imbriqués (défaut 5)
EMAIL_BLOCKS_FONT_FAMILY    police par défaut du document
EMAIL_BLOCKS_LOG_LEVEL      niveau de log de l'app FastAPI
EMAIL_BLOCKS_STRICT_RENDER  "1" → un type de bloc inconnu lève au lieu d'être ignoré
EMAIL_BLOCKS_HOST / _PORT  écoute du serveur uvicorn (python -m email_blocks.app)
"""
import os

MAX_NESTING_DEPTH = int(os.getenv("EMAIL_BLOCKS_MAX_NESTING", "5"))
DEFAULT_FONT_FAMILY = os.getenv("EMAIL_BLOCKS_FONT_FAMILY", "Arial, Helvetica, sans-serif")
LOG_LEVEL = os.getenv("EMAIL_BLOCKS_LOG_LEVEL", "INFO")
STRICT_RENDER = os.getenv("EMAIL_BLOCKS_STRICT_RENDER", "0") == "1"
HOST = os.getenv("EMAIL_BLOCKS_HOST", "127.0.0.1")
PORT = int(os.getenv("EMAIL_BLOCKS_PORT", "8000"))
