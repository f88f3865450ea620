"""
Structured restaurant extraction from bot replies.

Responsibilities:
- Detect whether a bot reply carries a restaurant list at all.
- Scan the reply line by line and accumulate fields per restaurant.
- Validate and default each record into a typed ExtractedEntity.
"""
