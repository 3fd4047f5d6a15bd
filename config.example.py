# config.example.py

"""
Documentation-only module (safe to commit).

Runtime settings are loaded from environment variables (optionally via a local .env file).
The API key is NOT an environment variable: it lives in a property-list file
(default: Secrets.plist, gitignored) under the key named by FOCUS_CREDENTIAL_KEY:

    <?xml version="1.0" encoding="UTF-8"?>
    <!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
    <plist version="1.0">
    <dict>
        <key>OPENAI_API_KEY</key>
        <string>sk-...</string>
    </dict>
    </plist>
"""

ENV_VARS = {
    # App / logging
    "FOCUS_APP_NAME": "App display name (default: focus).",
    "FOCUS_LOG_LEVEL": "Console logging level (default: INFO).",
    "FOCUS_DATA_DIR": "Local data directory for logs (default: .local/focus).",
    # Credential artifact
    "FOCUS_CREDENTIALS_PATH": "Property-list file holding the API key (default: Secrets.plist).",
    "FOCUS_CREDENTIAL_KEY": "Key name inside the plist (default: OPENAI_API_KEY).",
    # LLM
    "FOCUS_LLM_ENDPOINT": "OpenAI-compatible base URL (default: https://api.openai.com/v1).",
    "FOCUS_LLM_MODEL": "Model id (default: gpt-4o-mini).",
    "FOCUS_LLM_TEMPERATURE": "Sampling temperature (default: 0.7; empty => omitted).",
    # Matrix
    "FOCUS_SCHEME": "Quadrant scheme: eisenhower | effort_impact (default: eisenhower).",
    "FOCUS_SEED_DEMO_TASKS": "Start with demo tasks (true/false, default: true).",
}
