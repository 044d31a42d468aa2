"""
Interaction layer for intent routing.

Sits between the transports (HTTP, console) and the knowledge indexes,
providing deterministic routing without any model calls.
"""
from .intent_types import IntentType
from .intent_router import IntentRouter, IntentRule
from .responses import ChatResponse, WELCOME_MESSAGE

__all__ = ["IntentType", "IntentRouter", "IntentRule", "ChatResponse", "WELCOME_MESSAGE"]
