# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from companion.models.resources import ConditionInfo, CrisisResource

# Keyed by condition tag. "stress" is detectable but intentionally has no record here.
CONDITION_INFO = {
    "anxiety": ConditionInfo(
        name="Anxiety Disorders",
        description="Anxiety disorders involve persistent and excessive worry that interferes with daily activities.",
        symptoms=(
            "Excessive worry about everyday matters",
            "Restlessness or feeling on edge",
            "Difficulty concentrating",
            "Muscle tension",
            "Sleep problems",
            "Rapid heartbeat",
            "Sweating or trembling",
        ),
        coping_strategies=(
            "Deep breathing exercises (4-7-8 technique)",
            "Progressive muscle relaxation",
            "Regular physical exercise",
            "Limit caffeine and alcohol",
            "Practice mindfulness meditation",
            "Maintain a regular sleep schedule",
            "Challenge negative thoughts",
        ),
        when_to_seek_help="If anxiety interferes with daily life, relationships, or work for more than 2 weeks.",
    ),
    "depression": ConditionInfo(
        name="Depression",
        description=(
            "Depression is more than feeling sad. It's a serious mental health condition that "
            "affects how you feel, think, and handle daily activities."
        ),
        symptoms=(
            "Persistent sad, anxious, or empty mood",
            "Loss of interest in activities once enjoyed",
            "Fatigue and decreased energy",
            "Difficulty concentrating or making decisions",
            "Changes in appetite or weight",
            "Sleep disturbances",
            "Feelings of worthlessness or guilt",
            "Thoughts of death or suicide",
        ),
        coping_strategies=(
            "Maintain a routine and structure",
            "Set small, achievable goals",
            "Stay connected with supportive people",
            "Engage in physical activity",
            "Avoid isolation",
            "Practice self-compassion",
            "Challenge negative thought patterns",
            "Get adequate sleep",
        ),
        when_to_seek_help=(
            "Immediately if having suicidal thoughts. Otherwise, if symptoms persist for more "
            "than 2 weeks or interfere with functioning."
        ),
    ),
    "ptsd": ConditionInfo(
        name="Post-Traumatic Stress Disorder (PTSD)",
        description=(
            "PTSD develops after exposure to a traumatic event. It's characterized by "
            "re-experiencing the trauma, avoidance, and heightened alertness."
        ),
        symptoms=(
            "Intrusive memories or flashbacks",
            "Nightmares about the traumatic event",
            "Avoiding reminders of the trauma",
            "Negative changes in mood and thinking",
            "Being easily startled",
            "Difficulty sleeping",
            "Irritability or aggressive behavior",
            "Feelings of detachment",
        ),
        coping_strategies=(
            "Grounding techniques (5-4-3-2-1 method)",
            "Create a safe environment",
            "Maintain healthy routines",
            "Connect with support groups",
            "Practice relaxation techniques",
            "Avoid alcohol and drugs",
            "Physical exercise",
            "Keep a journal",
        ),
        when_to_seek_help=(
            "If symptoms persist for more than a month or significantly impair daily "
            "functioning. Professional trauma therapy is highly effective."
        ),
    ),
    "bipolar": ConditionInfo(
        name="Bipolar Disorder",
        description=(
            "Bipolar disorder involves alternating episodes of depression and mania, "
            "affecting mood, energy, and ability to function."
        ),
        symptoms=(
            "DEPRESSIVE EPISODES: Sadness, hopelessness, loss of energy",
            "MANIC EPISODES: Euphoria, increased energy, racing thoughts",
            "Decreased need for sleep during mania",
            "Rapid speech and racing thoughts",
            "Impulsive or reckless behavior",
            "Extreme mood swings",
            "Changes in activity levels",
        ),
        coping_strategies=(
            "Maintain a mood chart",
            "Stick to medication regimen (if prescribed)",
            "Keep regular sleep schedule",
            "Avoid alcohol and drugs",
            "Recognize early warning signs",
            "Build strong support system",
            "Reduce stress",
            "Regular exercise",
        ),
        when_to_seek_help=(
            "Bipolar disorder requires professional treatment. Seek help immediately if "
            "experiencing severe mania or depression."
        ),
    ),
    "existential": ConditionInfo(
        name="Existential Crisis",
        description=(
            "An existential crisis involves deep questioning about meaning, purpose, and "
            "the nature of existence itself."
        ),
        symptoms=(
            "Feeling that life lacks meaning or purpose",
            "Questioning one's identity and values",
            "Feeling disconnected from others",
            "Anxiety about death and mortality",
            "Difficulty making decisions",
            "Loss of motivation",
            "Feelings of insignificance",
        ),
        coping_strategies=(
            "Explore personal values and what matters to you",
            "Engage in meaningful activities",
            "Connect with others authentically",
            "Practice acceptance of uncertainty",
            "Read philosophy and existential literature",
            "Create and contribute to something larger",
            "Seek perspective through nature",
            "Consider therapy focused on meaning-making",
        ),
        when_to_seek_help=(
            "If existential concerns lead to depression, anxiety, or impaired functioning. "
            "Existential therapy can be particularly helpful."
        ),
    ),
}

CRISIS_RESOURCES = (
    CrisisResource(
        name="National Suicide Prevention Lifeline (US)",
        contact="988",
        available="24/7",
        description="Free and confidential support",
    ),
    CrisisResource(
        name="Crisis Text Line",
        contact="Text HOME to 741741",
        available="24/7",
        description="Text-based crisis support",
    ),
    CrisisResource(
        name="NAMI Helpline",
        contact="1-800-950-6264",
        available="M-F 10am-10pm ET",
        description="Mental health information and support",
    ),
    CrisisResource(
        name="International Association for Suicide Prevention",
        contact="https://www.iasp.info/resources/Crisis_Centres/",
        available="Varies by country",
        description="Find crisis centers worldwide",
    ),
)


def get_condition_info(condition: str):
    return CONDITION_INFO.get(condition)
