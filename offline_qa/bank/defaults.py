"""offline_qa.bank.defaults

Built-in QA bank used when the shipped dataset cannot be loaded.

Keep each question unambiguous: every entry here must win for its own exact question.
"""

from __future__ import annotations

from offline_qa.contracts.models import QABankEntry


def default_bank() -> list[QABankEntry]:
    return [
        QABankEntry(
            id="1",
            question="What is TuTu?",
            answer=(
                "TuTu is your personal AI agent manager app. It allows you to create and customize AI "
                "companions with persistent memory, offline capabilities, and advanced features like "
                "voice synthesis and face recognition."
            ),
            category="app_usage",
            keywords=("what", "tutu", "app", "about"),
            priority=2.0,
        ),
        QABankEntry(
            id="2",
            question="How do I create a new agent?",
            answer=(
                'Tap the "+" button on the home screen, choose a role (Girlfriend, Lawyer, Teacher, etc.), '
                'give your agent a name and personality, then tap "Create Agent". Your new agent will be '
                "ready to chat!"
            ),
            category="agent_creation",
            keywords=("create", "new", "agent", "add", "make"),
            priority=2.0,
        ),
        QABankEntry(
            id="3",
            question="How do I set up my API key?",
            answer=(
                "Go to Settings > API Configuration. Choose your provider (OpenAI, OpenRouter, etc.), enter "
                'your API key, and tap "Test Connection". You can get API keys from the provider\'s website.'
            ),
            category="api_setup",
            keywords=("api", "key", "setup", "configure", "openai", "openrouter"),
            priority=2.0,
        ),
        QABankEntry(
            id="4",
            question="Why do I need an API key?",
            answer=(
                "An API key allows your agents to use advanced AI models like GPT-4 and Claude. Without it, "
                "TuTu can only answer questions from its offline knowledge base."
            ),
            category="api_setup",
            keywords=("why", "need", "api", "key", "required"),
            priority=1.5,
        ),
        QABankEntry(
            id="5",
            question="How does memory work?",
            answer=(
                "TuTu has a multi-layer memory system: Active Memory (last 20 messages), Short-term Memory "
                "(last 500 messages), and Long-term Memory (all conversations with RAG search). This helps "
                "agents remember your conversations."
            ),
            category="features",
            keywords=("memory", "remember", "how", "work", "storage"),
            priority=1.5,
        ),
        QABankEntry(
            id="6",
            question="Can I customize my agent?",
            answer=(
                "Yes! You can customize your agent's name, role, personality, avatar, and voice. Tap on any "
                "agent to edit their settings."
            ),
            category="agent_customization",
            keywords=("customize", "edit", "change", "personality", "avatar"),
            priority=1.5,
        ),
        QABankEntry(
            id="7",
            question="Is my data private?",
            answer=(
                "Yes! All your data is stored locally on your device. Face data and conversations never "
                "leave your phone. You can delete all data anytime in Settings."
            ),
            category="privacy",
            keywords=("privacy", "private", "data", "secure", "safe"),
            priority=1.5,
        ),
        QABankEntry(
            id="8",
            question="How do I use voice features?",
            answer=(
                "Enable voice in Settings > Voice. In chat, tap the speaker icon on any message to hear it "
                "spoken. You can also enable auto-speak to have all responses read aloud."
            ),
            category="voice",
            keywords=("voice", "speak", "talk", "audio", "sound"),
            priority=1.5,
        ),
        QABankEntry(
            id="9",
            question="How does face recognition work?",
            answer=(
                "Tap the camera icon in chat to capture a photo. TuTu will detect faces and either recognize "
                "them or let you register a new person. This works completely offline."
            ),
            category="face_recognition",
            keywords=("face", "recognition", "camera", "photo", "identify"),
            priority=1.5,
        ),
        QABankEntry(
            id="10",
            question="My API key is not working",
            answer=(
                "Make sure you've copied the entire key correctly. Check that you've selected the correct "
                "provider. If using OpenRouter, ensure your account has credits. Try testing the connection "
                "in Settings."
            ),
            category="troubleshooting",
            keywords=("api", "key", "not working", "error", "problem"),
            priority=1.5,
        ),
        QABankEntry(
            id="11",
            question="What agents can I create?",
            answer=(
                "You can create various agents: Girlfriend, Boyfriend, Lawyer, Financial Advisor, Teacher, "
                "Friend, Therapist, Career Coach, or fully custom agents with unique personalities."
            ),
            category="agent_creation",
            keywords=("agents", "types", "create", "roles", "options"),
            priority=1.5,
        ),
        QABankEntry(
            id="12",
            question="Can agents talk to each other?",
            answer=(
                "Not yet! This is a planned feature. Currently, each agent has its own separate "
                "conversations and memories."
            ),
            category="features",
            keywords=("agents", "talk", "each other", "multi-agent", "together"),
            priority=1.0,
        ),
        QABankEntry(
            id="13",
            question="How do I delete an agent?",
            answer=(
                "Go to the Agents list, swipe left on the agent you want to delete, or tap and hold for "
                "options. Note: The default TuTu agent cannot be deleted."
            ),
            category="agent_creation",
            keywords=("delete", "remove", "agent", "erase"),
            priority=1.5,
        ),
        QABankEntry(
            id="14",
            question="Can I export my data?",
            answer=(
                "Yes! Go to Settings > Memory Management > Export Data. You can export all your "
                "conversations, agents, and memories as a JSON file."
            ),
            category="features",
            keywords=("export", "backup", "save", "data"),
            priority=1.0,
        ),
        QABankEntry(
            id="15",
            question="What is OpenRouter?",
            answer=(
                "OpenRouter is a service that provides access to multiple AI models (GPT-4, Claude, Gemini, "
                "etc.) through a single API. It's a great option if you want to try different models."
            ),
            category="api_setup",
            keywords=("openrouter", "what", "api", "models"),
            priority=1.5,
        ),
    ]
