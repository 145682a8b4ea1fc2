"""
Default Vocabularies

Symptoms, triggers and coping tools offered by the app's pickers.
Clients may send values outside these lists; they are accepted as-is.
"""

DEFAULT_SYMPTOMS: tuple[str, ...] = (
    "Racing heart",
    "Tight chest",
    "Shallow breathing",
    "Sweating",
    "Trembling",
    "Nausea",
    "Dizziness",
    "Racing thoughts",
    "Feeling detached",
    "Restlessness",
)

# Symptoms that bias the remote classifier toward grounding
CARDIORESPIRATORY_SYMPTOMS: frozenset[str] = frozenset({
    "Racing heart",
    "Tight chest",
})

# Symptoms that bias the remote classifier toward breathing
COGNITIVE_SYMPTOMS: frozenset[str] = frozenset({
    "Racing thoughts",
})

DEFAULT_TRIGGERS: tuple[str, ...] = (
    "Work",
    "Social",
    "Health",
    "Family",
    "Money",
    "Future",
    "Past",
    "Uncertainty",
    "Conflict",
    "Performance",
    "Other",
)

DEFAULT_TOOLS: tuple[str, ...] = (
    "Box breathing",
    "Paced breathing",
    "Physiological sigh",
    "5-4-3-2-1 grounding",
    "Muscle relaxation",
    "Thought reframe",
    "Worry postponement",
    "Safe memory",
    "Mantra",
    "Walk",
    "Water",
    "Talk to someone",
)

BREATHING_TOOLS: frozenset[str] = frozenset({
    "Box breathing",
    "Paced breathing",
})

GROUNDING_TOOL = "5-4-3-2-1 grounding"
