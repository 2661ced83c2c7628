from __future__ import annotations

WELCOME_MESSAGE = (
    "Hi! I'm your task assistant. Ask me to add, list or complete tasks, "
    "or ask for help planning your day."
)

GREETINGS = (
    "Hello! Ready to get things done?",
    "Hey there! Good to see you.",
    "Hi! What are we working on today?",
    "Hello again! Let's make today count.",
)

CLEAN_SLATE_SUFFIX = "Your slate is clean, so it's a great moment to add something new."
PENDING_SUFFIX = "You have {pending} pending task{plural} waiting for you."

MOTIVATION_TIPS = (
    "Start with the smallest task on your list. Momentum is easier to keep than to build.",
    "Work in short, focused bursts and take a real break in between.",
    "Remember why each task matters. Purpose is a strong motivator.",
    "Progress beats perfection. Finishing something imperfect is still finishing.",
    "Silence notifications for 25 minutes and see how much you get through.",
)

TIME_MANAGEMENT_TIPS = (
    "Try time-blocking: give each task a fixed slot in your calendar.",
    "Tackle your most important task first, before the day gets noisy.",
    "Use the two-minute rule: if something takes less than two minutes, do it now.",
    "Set a deadline for every task, even the ones that don't have one.",
    "Batch similar tasks together to avoid constant context switching.",
)

ORGANIZE_ADVICE = (
    "Here's a simple way to organize: pick your top three tasks for today, "
    "group the rest by context, and schedule anything that needs a fixed time."
)

BREAKDOWN_ADVICE = (
    "Big tasks feel lighter in pieces. Write down the very first physical step, "
    "keep each step under an hour, and add the steps as separate tasks."
)

HELP_TEXT = "\n".join(
    [
        "I can help you with:",
        "- Managing tasks: \"add task: Buy groceries\", \"show my tasks\", \"complete a task\", \"delete a task\"",
        "- Planning: \"help me organize my day\"",
        "- Motivation: \"I need some motivation\"",
        "- Breaking down big work: \"this project feels overwhelming\"",
        "- Time management: \"how do I handle deadlines?\"",
        "- Progress: \"what's my progress?\"",
    ]
)

TODO_HELP_TEXT = "\n".join(
    [
        "Here are some things you can ask me about your tasks:",
        "- \"add task: Call the dentist\"",
        "- \"show my tasks\"",
        "- \"complete a task\"",
        "- \"delete a task\"",
    ]
)

ADD_TASK_RETRY = (
    "I couldn't tell what the task should say. Try something like "
    "\"add task: Buy groceries\"."
)

FALLBACK_REPLIES = (
    "I'm not sure I follow. Could you rephrase that?",
    "Interesting! I'm best at helping with your tasks. Try asking me to show your list.",
    "I didn't quite catch that. Type \"help\" to see what I can do.",
    "Hmm, I don't have an answer for that one. Want to add it as a task instead?",
)

CONFIGURE_KEY_HINT = (
    "(Tip: configure an API key with `taskmate setup` to get free-form answers.)"
)
