"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Answer chat messages directly when no bot webhook is configured.
- Keep replies in the restaurant list format the extractor reads.
"""
