"""
Pairing request handling.

Responsibilities:
- Validate the dishes chosen by the guest (1 to 5).
- Orchestrate catalog loading, prompt building and the Groq call.
- Turn failures into a status code and a localized message.
"""
