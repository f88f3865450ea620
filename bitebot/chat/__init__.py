"""
Chat relay layer.

Responsibilities:
- Forward user messages to the upstream bot and read its JSON reply.
- Reduce the reply to plain-text fulfillment messages.
- Define the request/response models of the chat API.
"""
