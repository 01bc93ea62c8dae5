"""
Environment configuration module
Loads optional settings for the CLI, the engine router and the remote clients.
The rule engine itself never reads from here.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Remote model (optional)
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
GPT_MODEL = os.getenv('GPT_MODEL', 'gpt-4o-mini')
GPT_ENABLED = bool(OPENAI_API_KEY)

# Chat proxy (optional, same contract as the browser client)
ASSISTANT_PROXY_URL = os.getenv('ASSISTANT_PROXY_URL', 'http://localhost:3001/api/chat')
ASSISTANT_SUMMARY_URL = os.getenv('ASSISTANT_SUMMARY_URL', 'http://localhost:3001/api/summarize')
ASSISTANT_TIMEOUT = int(os.getenv('ASSISTANT_TIMEOUT', '10'))

# Interpretation defaults
DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'es')
DEFAULT_CURRENCY = os.getenv('DEFAULT_CURRENCY', 'COP')
TIMEZONE = os.getenv('TIMEZONE', 'America/Bogota')

# Fixed exchange rates: COP per one unit of the foreign currency
FX_RATE_USD = float(os.getenv('FX_RATE_USD', '4200'))
FX_RATE_EUR = float(os.getenv('FX_RATE_EUR', '4600'))

if DEFAULT_LANGUAGE not in ('es', 'en'):
    raise ValueError(f"Unsupported DEFAULT_LANGUAGE: {DEFAULT_LANGUAGE}")

if DEFAULT_CURRENCY not in ('COP', 'USD', 'EUR'):
    raise ValueError(f"Unsupported DEFAULT_CURRENCY: {DEFAULT_CURRENCY}")
