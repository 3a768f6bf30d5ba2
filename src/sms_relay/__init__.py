from __future__ import annotations

from dotenv import load_dotenv

# Pick up TWILIO_* and friends from a local .env in dev. Real env vars win.
load_dotenv()
