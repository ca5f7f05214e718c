"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build the sommelier prompt from the selected dishes and the wine list.
- Call the Groq chat completion API with a timeout.
- Classify upstream failures and retry transient ones with backoff.
"""
