"""
Exercise Library
----------------
Curated catalog of home-friendly exercises with English and Bangla names,
and the motivational tips shown alongside each daily plan.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

CARDIO = "cardio"
STRENGTH = "strength"
FLEXIBILITY = "flexibility"
SPORTS = "sports"

CATEGORIES = (CARDIO, STRENGTH, FLEXIBILITY, SPORTS)


@dataclass(frozen=True)
class ExerciseDefinition:
    id: str
    name_en: str
    name_bn: str
    category: str           # one of CATEGORIES
    default_duration: int   # minutes

    def to_workout_item(self) -> Dict:
        """Fresh, unchecked plan item in the stored wire shape."""
        return {
            "id": self.id,
            "name": self.name_en,
            "name_bn": self.name_bn,
            "duration": self.default_duration,
            "type": self.category,
            "checked": False,
            "completed_at": None,
        }


EXERCISE_LIBRARY: Tuple[ExerciseDefinition, ...] = (
    # Cardio
    ExerciseDefinition("brisk_walk", "Brisk Walking", "দ্রুত হাঁটা", CARDIO, 15),
    ExerciseDefinition("spot_jogging", "Spot Jogging", "এক জায়গায় জগিং", CARDIO, 10),
    ExerciseDefinition("jumping_jacks", "Jumping Jacks", "জাম্পিং জ্যাক", CARDIO, 5),
    ExerciseDefinition("high_knees", "High Knees", "হাই নিজ", CARDIO, 5),
    ExerciseDefinition("stair_climbing", "Stair Climbing", "সিঁড়ি ওঠা-নামা", CARDIO, 10),
    ExerciseDefinition("dancing", "Dancing", "নাচ", CARDIO, 15),
    ExerciseDefinition("skipping", "Skipping/Jump Rope", "দড়ি লাফ", CARDIO, 10),

    # Strength
    ExerciseDefinition("pushups", "Push-ups", "পুশ-আপ", STRENGTH, 5),
    ExerciseDefinition("squats", "Squats", "স্কোয়াট", STRENGTH, 5),
    ExerciseDefinition("lunges", "Lunges", "লাঞ্জ", STRENGTH, 5),
    ExerciseDefinition("plank", "Plank Hold", "প্ল্যাঙ্ক", STRENGTH, 3),
    ExerciseDefinition("wall_sit", "Wall Sit", "ওয়াল সিট", STRENGTH, 3),
    ExerciseDefinition("crunches", "Crunches", "ক্রাঞ্চ", STRENGTH, 5),
    ExerciseDefinition("leg_raises", "Leg Raises", "লেগ রেইজ", STRENGTH, 5),
    ExerciseDefinition("burpees", "Burpees", "বার্পি", STRENGTH, 5),

    # Flexibility
    ExerciseDefinition("stretching", "Full Body Stretching", "স্ট্রেচিং", FLEXIBILITY, 10),
    ExerciseDefinition("yoga", "Yoga Poses", "যোগাসন", FLEXIBILITY, 15),
    ExerciseDefinition("neck_rolls", "Neck Rolls", "ঘাড় ঘোরানো", FLEXIBILITY, 3),
    ExerciseDefinition("shoulder_stretch", "Shoulder Stretch", "কাঁধের স্ট্রেচ", FLEXIBILITY, 3),
    ExerciseDefinition("toe_touch", "Toe Touch", "পায়ের আঙুল স্পর্শ", FLEXIBILITY, 3),
    ExerciseDefinition("hip_stretch", "Hip Stretch", "নিতম্বের স্ট্রেচ", FLEXIBILITY, 5),

    # Sports
    ExerciseDefinition("cricket", "Cricket Practice", "ক্রিকেট অনুশীলন", SPORTS, 30),
    ExerciseDefinition("football", "Football/Soccer", "ফুটবল", SPORTS, 30),
    ExerciseDefinition("badminton", "Badminton", "ব্যাডমিন্টন", SPORTS, 20),
    ExerciseDefinition("cycling", "Cycling", "সাইকেল চালানো", SPORTS, 20),
    ExerciseDefinition("swimming", "Swimming", "সাঁতার", SPORTS, 20),
)

# Index-aligned: WORKOUT_TIPS_EN[i] and WORKOUT_TIPS_BN[i] say the same thing
WORKOUT_TIPS_EN = (
    "Start slow, build momentum. Every rep counts!",
    "Consistency beats intensity. Show up daily!",
    "Hydrate well before and after your workout.",
    "Listen to your body - rest when needed.",
    "Morning exercise boosts energy all day!",
    "A 10-minute workout beats no workout.",
    "Celebrate small wins - you showed up!",
    "Mix cardio and strength for best results.",
)
WORKOUT_TIPS_BN = (
    "ধীরে শুরু করুন, গতি বাড়ান। প্রতিটি প্রচেষ্টা গুরুত্বপূর্ণ!",
    "ধারাবাহিকতা সবচেয়ে জরুরি। প্রতিদিন চেষ্টা করুন!",
    "ব্যায়ামের আগে ও পরে প্রচুর পানি পান করুন।",
    "শরীরের কথা শুনুন - প্রয়োজনে বিশ্রাম নিন।",
    "সকালের ব্যায়াম সারাদিন শক্তি দেয়!",
    "১০ মিনিটের ব্যায়ামও অনেক কার্যকর।",
    "ছোট সাফল্যও উদযাপন করুন - আপনি এসেছেন!",
    "কার্ডিও ও শক্তি একসাথে করুন সেরা ফলাফলের জন্য।",
)


def get_exercise(exercise_id: str, library: Sequence[ExerciseDefinition] = EXERCISE_LIBRARY) -> Optional[ExerciseDefinition]:
    for exercise in library:
        if exercise.id == exercise_id:
            return exercise
    return None


def get_exercises_by_category(category: str, library: Sequence[ExerciseDefinition] = EXERCISE_LIBRARY) -> List[ExerciseDefinition]:
    return [e for e in library if e.category == category]


def pick_tip(rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Return a random (english, bangla) tip pair."""
    rng = rng or random
    idx = rng.randrange(len(WORKOUT_TIPS_EN))
    return WORKOUT_TIPS_EN[idx], WORKOUT_TIPS_BN[idx]
