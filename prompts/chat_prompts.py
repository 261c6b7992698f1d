"""
Chat-related prompts: chat title generation and assistant persona system messages.
"""

# System message for title generation
CHAT_TITLE_SYSTEM_MESSAGE = (
    "You are a helpful assistant that generates concise, descriptive titles for chat conversations."
    " Generate a title that is 2-6 words long and captures the main topic or intent of the user's first message."
    " Do not use quotes or special formatting."
)

# Template variables: {first_message}
CHAT_TITLE_USER_MESSAGE_TEMPLATE = 'Generate a title for a chat that starts with this message: "{first_message}"'

# System message built from the assistant record bound to a chat
# Template variables: {instructions}, {persona}
ASSISTANT_SYSTEM_MESSAGE_TEMPLATE = "{instructions}\n\nPersona: {persona}"
