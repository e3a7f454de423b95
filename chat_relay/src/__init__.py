"""
Core package for the chat relay service.

This package contains the main application logic and components including:
- Data classes for user identities
- Services for identity, conversation context, LLM completion, storage and the chat platform
- API routes and endpoints
"""
