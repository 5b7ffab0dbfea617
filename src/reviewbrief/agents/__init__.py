from reviewbrief.agents.reviewer import ReviewModel, build_chat_model

__all__ = [
    "ReviewModel",
    "build_chat_model",
]
