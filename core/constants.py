from typing import Literal

# Ключи интересов хранятся в БД, подписи показывает клиент
INTEREST_MAP = {
    "music": "🎵 Music",
    "movies": "🎬 Movies",
    "reading": "📚 Reading",
    "sports": "🏃 Sports",
    "cooking": "🍳 Cooking",
    "travel": "✈️ Travel",
    "art": "🎨 Art",
    "gaming": "🎮 Gaming",
    "photography": "📸 Photography",
    "yoga": "🧘 Yoga",
    "fitness": "🏋️ Fitness",
    "theater": "🎭 Theater",
    "wine": "🍷 Wine",
    "coffee": "☕ Coffee",
    "nature": "🌿 Nature",
    "pets": "🐕 Pets",
    "dancing": "💃 Dancing",
    "karaoke": "🎤 Karaoke",
    "beach": "🏖️ Beach",
    "hiking": "⛰️ Hiking",
}

GENDERS = ("male", "female", "other")
SEEKING_GENDERS = ("male", "female", "both")
SWIPE_ACTIONS = ("like", "pass")

Gender = Literal["male", "female", "other"]
SeekingGender = Literal["male", "female", "both"]
SwipeAction = Literal["like", "pass"]
