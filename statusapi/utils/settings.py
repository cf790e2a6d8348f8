import os

from dotenv import load_dotenv

load_dotenv()

# Logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
# $JOURNAL_STREAM is set by systemd v231+
under_journald = "JOURNAL_STREAM" in os.environ

# HTTP listener
listen_host = os.getenv("LISTEN_HOST", "0.0.0.0")
listen_port = int(os.getenv("LISTEN_PORT", 8000))

# CS:GO remote console
# Supported: "http", "rcon"
csgo_transport = os.getenv("CSGO_TRANSPORT", "http").lower()
csgo_timeout = float(os.getenv("CSGO_TIMEOUT", 10.0))

# HTTP exec tunnel
csgo_exec_url = os.getenv("CSGO_EXEC_URL", "http://127.0.0.1:8001/api/exec/")

# Source RCON
csgo_rcon_host = os.getenv("CSGO_RCON_HOST", "127.0.0.1")
csgo_rcon_port = int(os.getenv("CSGO_RCON_PORT", 27015))
csgo_rcon_password = os.getenv("CSGO_RCON_PASSWORD", "")
