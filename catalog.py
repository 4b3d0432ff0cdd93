"""
Curated wellness activities offered as suggestions.

Order matters: the ranker breaks mood_boost ties by position in
ACTIVITY_CATALOG.
"""
from schemas import ActivitySuggestion, SupportResource

ACTIVITY_CATALOG = tuple(ActivitySuggestion(**item) for item in [
    # Crisis & emergency coping
    {"name": "Breathing Focus", "category": "Crisis Support",
     "description": "5-minute breathing exercises to regain control in moments of distress",
     "mood_boost": 5, "difficulty": "Easy", "time_commitment": "5-10 minutes",
     "therapeutic_benefit": "Immediate anxiety relief",
     "crisis_support": True, "stress_level": "emergency"},
    {"name": "Grounding Techniques", "category": "Crisis Support",
     "description": "5-4-3-2-1 sensory grounding and mindfulness exercises",
     "mood_boost": 5, "difficulty": "Easy", "time_commitment": "10-15 minutes",
     "therapeutic_benefit": "Panic attack management",
     "crisis_support": True, "stress_level": "emergency"},
    {"name": "Gentle Movement", "category": "Crisis Support",
     "description": "Slow stretching or walking to release physical tension",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "10-20 minutes",
     "therapeutic_benefit": "Trauma release and grounding",
     "crisis_support": True, "stress_level": "high"},

    # Stress relief
    {"name": "Art Therapy", "category": "Creative Healing",
     "description": "Express emotions through colors, shapes, and textures without judgment",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "20-60 minutes",
     "therapeutic_benefit": "Emotional processing and release",
     "stress_level": "high"},
    {"name": "Nature Immersion", "category": "Restorative",
     "description": "Spend time outdoors, even just sitting by a window with plants",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "15-30 minutes",
     "therapeutic_benefit": "Reduced cortisol levels",
     "stress_level": "moderate"},
    {"name": "Comfort Crafting", "category": "Mindful Creation",
     "description": "Simple, repetitive crafts like knitting or origami for soothing focus",
     "mood_boost": 3, "difficulty": "Easy", "time_commitment": "30-90 minutes",
     "therapeutic_benefit": "Meditative mindfulness",
     "stress_level": "moderate"},

    # Social connection
    {"name": "Video Call Check-in", "category": "Connection",
     "description": "Schedule a 15-minute call with a trusted friend or family member",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "15-30 minutes",
     "therapeutic_benefit": "Combat isolation",
     "social_support": True},
    {"name": "Community Volunteering", "category": "Purpose",
     "description": "Help others through local food banks, animal shelters, or online mentoring",
     "mood_boost": 5, "difficulty": "Medium", "time_commitment": "1-3 hours",
     "therapeutic_benefit": "Sense of purpose and connection",
     "social_support": True},
    {"name": "Support Group Participation", "category": "Healing Community",
     "description": "Join online or local mental health support groups",
     "mood_boost": 4, "difficulty": "Medium", "time_commitment": "60-90 minutes",
     "therapeutic_benefit": "Shared experience and validation",
     "social_support": True},

    # Body-mind
    {"name": "Trauma-Informed Yoga", "category": "Body-Mind Healing",
     "description": "Gentle yoga focused on body awareness and emotional release",
     "mood_boost": 5, "difficulty": "Easy", "time_commitment": "20-45 minutes",
     "therapeutic_benefit": "Nervous system regulation"},
    {"name": "Walking Meditation", "category": "Moving Mindfulness",
     "description": "Slow, intentional walking while focusing on each step and breath",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "15-30 minutes",
     "therapeutic_benefit": "Integration of movement and mindfulness"},
    {"name": "Dance Therapy", "category": "Expressive Movement",
     "description": "Free movement to music for emotional expression and joy",
     "mood_boost": 5, "difficulty": "Easy", "time_commitment": "20-40 minutes",
     "therapeutic_benefit": "Endorphin release and emotional expression"},

    # Cognitive
    {"name": "Mindfulness Journaling", "category": "Reflective Practice",
     "description": "Guided prompts for processing emotions and thoughts",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "15-30 minutes",
     "therapeutic_benefit": "Emotional regulation and self-awareness"},
    {"name": "Learning for Joy", "category": "Mental Stimulation",
     "description": "Learn something purely for pleasure - languages, music, or skills",
     "mood_boost": 3, "difficulty": "Medium", "time_commitment": "30-60 minutes",
     "therapeutic_benefit": "Cognitive flexibility and achievement"},
    {"name": "Puzzle Meditation", "category": "Focused Calm",
     "description": "Jigsaw puzzles, sudoku, or crosswords for present-moment focus",
     "mood_boost": 3, "difficulty": "Easy", "time_commitment": "30-90 minutes",
     "therapeutic_benefit": "Anxiety reduction through focus"},

    # Creative expression
    {"name": "Music Therapy", "category": "Sound Healing",
     "description": "Listen to, create, or play music for emotional processing",
     "mood_boost": 5, "difficulty": "Easy", "time_commitment": "20-60 minutes",
     "therapeutic_benefit": "Mood regulation and emotional release"},
    {"name": "Storytelling & Writing", "category": "Narrative Therapy",
     "description": "Write your story, poetry, or fictional narratives for perspective",
     "mood_boost": 4, "difficulty": "Easy", "time_commitment": "20-45 minutes",
     "therapeutic_benefit": "Meaning-making and self-understanding"},
    {"name": "Photography Mindfulness", "category": "Visual Awareness",
     "description": "Capture moments of beauty and meaning in everyday life",
     "mood_boost": 3, "difficulty": "Easy", "time_commitment": "15-60 minutes",
     "therapeutic_benefit": "Present-moment awareness and gratitude"},
])

SUPPORT_RESOURCES = (
    SupportResource(name="Crisis Text Line", contact="Text HOME to 741741",
                    description="24/7 crisis support"),
    SupportResource(name="National Suicide Prevention Lifeline", contact="988",
                    description="24/7 emotional support"),
    SupportResource(name="SAMHSA Helpline", contact="1-800-662-4357",
                    description="Mental health and substance use support"),
)
