# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


# -------------------------
# Category responses
# -------------------------

RESPONSE_TEMPLATES = {
    "anxiety": (
        "I can hear that you're feeling anxious right now. Those feelings are real and valid. Can you tell me more about what's triggering these feelings?",
        "Anxiety can be overwhelming. Remember, you're not alone in feeling this way. What specific worries are weighing on you?",
        "It's okay to feel anxious. Many people experience these feelings. Let's talk through what's causing this worry.",
        "I understand you're experiencing anxiety. That takes courage to share. What would help you feel more grounded right now?",
    ),
    "depression": (
        "I hear that you're going through a really difficult time. Your feelings are valid, and I'm here to listen. Please tell me more.",
        "What you're feeling matters, and you matter. Depression is heavy, but you don't have to carry it alone. How long have you been feeling this way?",
        "Thank you for trusting me with this. Feeling hopeless is incredibly hard. Have you been able to talk to anyone else about these feelings?",
        "I'm really concerned about how you're feeling. Your life has value, even when it doesn't feel that way. Can you tell me more about what's going on?",
    ),
    "stress": (
        "It sounds like you're under a lot of pressure right now. That's exhausting. What's been the most stressful part?",
        "Feeling overwhelmed is a sign that you're dealing with a lot. Let's break this down together. What's weighing most heavily on you?",
        "Stress can be really draining. You're doing your best, and that's enough. What would help you feel less overwhelmed right now?",
        "I hear you. Life can pile on sometimes. What support do you have around you?",
    ),
    "existential": (
        "Questions about meaning and purpose are profound and completely normal. Many people wrestle with these thoughts. What prompted this reflection?",
        "Existential questions show you're thinking deeply about life. That's actually a sign of awareness. What aspect of meaning troubles you most?",
        "Feeling disconnected from purpose can be unsettling. But asking these questions is the first step toward finding your own meaning. What matters to you?",
        "These are big questions you're grappling with. There's no one right answer, but exploring them together might help. What brings you even small moments of meaning?",
    ),
}

GENERAL_TEMPLATES = (
    "Thank you for sharing that with me. I'm here to listen without judgment. Can you tell me more about what you're experiencing?",
    "I appreciate you opening up. Your feelings are important. What else is on your mind?",
    "It takes courage to talk about these things. I'm here for you. How are you coping with all of this?",
    "I'm listening. Your thoughts and feelings matter. What would be most helpful for you right now?",
)

# -------------------------
# Follow-ups
# -------------------------

FOLLOW_UP_PROMPTS = (
    "What led you to feel this way?",
    "How long have you been experiencing this?",
    "Have you noticed any patterns to when you feel like this?",
    "What usually helps you when you're feeling this way?",
    "Is there someone in your life you feel comfortable talking to?",
    "What's one small thing that might help you feel a bit better today?",
)

# -------------------------
# Fixed replies
# -------------------------

WELCOME_MESSAGE = (
    "Hello, I'm here to listen and support you. This is a safe space to share "
    "your thoughts and feelings. What's on your mind today?"
)

# Sent by the server when reply generation itself fails
SERVER_FALLBACK_REPLY = "I'm here to listen. Please tell me more about what you're experiencing."

# Shown by the client when the chat round-trip fails
CLIENT_FALLBACK_REPLY = (
    "I'm having trouble connecting right now, but I'm here for you. Could you try again?"
)
