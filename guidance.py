from typing import Dict, List, Optional

DEFAULT_GUIDANCE: Dict[str, List[str]] = {
    "crisis": [
        "You seem to be going through a difficult time. These activities can provide immediate support.",
        "Remember: You're not alone. Consider reaching out to a mental health professional.",
    ],
    "high-stress": [
        "These activities are designed to help reduce stress and promote calm.",
        "Start with shorter sessions and gradually increase time as you feel more comfortable.",
    ],
    "connection": [
        "Connection with others can be healing. Try these social and mood-boosting activities.",
    ],
    "moderate": [
        "These activities can help lift your spirits and build positive momentum.",
    ],
    "good": [
        "You're in a good space! These activities can help maintain and enhance your wellbeing.",
    ],
}


class StaticGuidance:
    """Fixed guidance text per suggestion branch."""

    def __init__(self, messages: Optional[Dict[str, List[str]]] = None):
        self.messages = DEFAULT_GUIDANCE if messages is None else messages

    def for_branch(self, branch: str) -> List[str]:
        return list(self.messages.get(branch, []))
