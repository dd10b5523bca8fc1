import random
import unittest
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from desi_nutri.database import Base
import desi_nutri.models  # registers all tables on Base
from desi_nutri.crud import workout_plan as crud_workout_plan
from desi_nutri.models.tracking import ExerciseLog
from desi_nutri.models.workout_plan import WorkoutPlan
from desi_nutri.services import workout_service

# Use an in-memory SQLite DB shared across sessions
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TODAY = date(2026, 1, 20)
YESTERDAY = TODAY - timedelta(days=1)
NOW = datetime(2026, 1, 20, 7, 30, tzinfo=timezone.utc)
USER = "user-123"


def _item(name, name_bn, duration, checked=False, exercise_id=None, type_="cardio"):
    return {
        "id": exercise_id,
        "name": name,
        "name_bn": name_bn,
        "duration": duration,
        "type": type_,
        "checked": checked,
        "completed_at": NOW.isoformat() if checked else None,
    }


class WorkoutServiceTestCase(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def store_plan(self, plan_date, workouts, user_id=USER):
        plan = crud_workout_plan.create_plan(
            self.db, user_id=user_id, plan_date=plan_date, workouts=workouts,
            tip_en="tip", tip_bn="টিপ",
        )
        self.db.commit()
        return plan


class TestGetOrCreateTodayPlan(WorkoutServiceTestCase):

    def test_first_request_creates_weight_loss_plan(self):
        self.assertIsNone(crud_workout_plan.get_plan_for_date(self.db, USER, TODAY))

        plan, missed = workout_service.get_or_create_today_plan(
            self.db, USER, "weight_loss", False, TODAY, rng=random.Random(1))

        self.assertEqual(missed, [])
        self.assertEqual(plan.plan_date, TODAY)
        self.assertEqual(plan.missed_count, 0)
        self.assertEqual(len(plan.workouts), 5)
        self.assertTrue(plan.generated_en and plan.generated_bn)
        types = Counter(w["type"] for w in plan.workouts)
        self.assertGreater(types["cardio"], types["strength"])
        for item in plan.workouts:
            self.assertFalse(item["checked"])
            self.assertIsNone(item["completed_at"])
        self.assertEqual(crud_workout_plan.count_plans_for_date(self.db, USER, TODAY), 1)

    def test_repeat_request_returns_same_plan(self):
        first, _ = workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)
        second, _ = workout_service.get_or_create_today_plan(self.db, USER, "muscle", False, TODAY)
        self.assertEqual(first.id, second.id)
        self.assertEqual(first.workouts, second.workouts)

    def test_force_regenerate_replaces_plan(self):
        ids = []
        for force in (False, True, True):
            plan, _ = workout_service.get_or_create_today_plan(self.db, USER, None, force, TODAY)
            ids.append(plan.id)

        self.assertEqual(len(set(ids)), 3)
        self.assertEqual(crud_workout_plan.count_plans_for_date(self.db, USER, TODAY), 1)
        self.assertEqual(crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).id, ids[-1])

    def test_force_regenerate_without_existing_plan(self):
        plan, _ = workout_service.get_or_create_today_plan(self.db, USER, None, True, TODAY)
        self.assertEqual(crud_workout_plan.count_plans_for_date(self.db, USER, TODAY), 1)
        self.assertEqual(len(plan.workouts), 5)

    def test_yesterdays_unchecked_items_are_missed(self):
        self.store_plan(YESTERDAY, [
            _item("Push-ups", "পুশ-আপ", 5, checked=False, exercise_id="pushups", type_="strength"),
            _item("Plank", "প্ল্যাঙ্ক", 3, checked=True, exercise_id="plank", type_="strength"),
        ])

        plan, missed = workout_service.get_or_create_today_plan(
            self.db, USER, None, False, TODAY, rng=random.Random(3))

        self.assertEqual(missed, [{"en": "Push-ups", "bn": "পুশ-আপ", "id": "pushups"}])
        self.assertEqual(plan.missed_count, 1)
        self.assertEqual(plan.workouts[0]["id"], "pushups")

    def test_missed_items_reported_on_cached_plan(self):
        self.store_plan(YESTERDAY, [_item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk")])
        first, _ = workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)
        second, missed = workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)

        self.assertEqual(first.id, second.id)
        self.assertEqual([m["en"] for m in missed], ["Brisk Walking"])

    def test_manual_item_without_id_is_missed_but_not_carried(self):
        self.store_plan(YESTERDAY, [_item("Evening Rickshaw Ride", "", 20)])

        plan, missed = workout_service.get_or_create_today_plan(
            self.db, USER, None, False, TODAY, rng=random.Random(0))

        self.assertEqual(missed, [{"en": "Evening Rickshaw Ride", "bn": "Evening Rickshaw Ride", "id": ""}])
        self.assertNotIn("Evening Rickshaw Ride", [w["name"] for w in plan.workouts])
        self.assertEqual(len(plan.workouts), 5)

    def test_plans_are_per_user(self):
        mine, _ = workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)
        theirs, _ = workout_service.get_or_create_today_plan(self.db, "someone-else", None, False, TODAY)
        self.assertNotEqual(mine.id, theirs.id)

    def test_concurrent_insert_returns_stored_plan(self):
        stored = self.store_plan(TODAY, [_item("Dancing", "নাচ", 15, exercise_id="dancing")])
        stored_id = stored.id

        # Yesterday lookup and today's existence check both miss; the insert then collides
        with patch.object(workout_service.crud_workout_plan, "get_plan_for_date",
                          side_effect=[None, None, stored]):
            plan, missed = workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)

        self.assertEqual(plan.id, stored_id)
        self.assertEqual(missed, [])
        self.assertEqual(crud_workout_plan.count_plans_for_date(self.db, USER, TODAY), 1)

    def test_force_regenerate_collision_keeps_stored_plan(self):
        stored_id = self.store_plan(TODAY, [_item("Dancing", "নাচ", 15, exercise_id="dancing")]).id

        with patch.object(workout_service.crud_workout_plan, "create_plan",
                          side_effect=IntegrityError("INSERT", {}, Exception("duplicate key"))):
            plan, _ = workout_service.get_or_create_today_plan(self.db, USER, None, True, TODAY)

        # The delete was rolled back with the failed insert
        self.assertEqual(plan.id, stored_id)
        self.assertEqual(crud_workout_plan.count_plans_for_date(self.db, USER, TODAY), 1)
        self.assertEqual(plan.workouts[0]["name"], "Dancing")

    def test_persistence_failure_propagates(self):
        with patch.object(workout_service.crud_workout_plan, "create_plan",
                          side_effect=OperationalError("INSERT", {}, Exception("db down"))):
            with self.assertRaises(OperationalError):
                workout_service.get_or_create_today_plan(self.db, USER, None, False, TODAY)


class TestSetItemChecked(WorkoutServiceTestCase):

    def setUp(self):
        super().setUp()
        self.plan = self.store_plan(TODAY, [
            _item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk"),
            _item("Squats", "স্কোয়াট", 5, exercise_id="squats", type_="strength"),
        ])

    def test_check_sets_completed_at(self):
        plan = workout_service.set_item_checked(self.db, USER, self.plan.id, 1, True, now=NOW)
        self.assertTrue(plan.workouts[1]["checked"])
        self.assertEqual(plan.workouts[1]["completed_at"], NOW.isoformat())
        self.assertFalse(plan.workouts[0]["checked"])

        stored = WorkoutPlan.__table__
        row = self.db.execute(stored.select().where(stored.c.id == self.plan.id)).first()
        self.assertTrue(row.workouts[1]["checked"])

    def test_uncheck_clears_completed_at(self):
        workout_service.set_item_checked(self.db, USER, self.plan.id, 0, True, now=NOW)
        plan = workout_service.set_item_checked(self.db, USER, self.plan.id, 0, False, now=NOW)
        self.assertFalse(plan.workouts[0]["checked"])
        self.assertIsNone(plan.workouts[0]["completed_at"])

    def test_recheck_keeps_first_completed_at(self):
        workout_service.set_item_checked(self.db, USER, self.plan.id, 0, True, now=NOW)
        plan = workout_service.set_item_checked(
            self.db, USER, self.plan.id, 0, True, now=NOW + timedelta(hours=2))
        self.assertEqual(plan.workouts[0]["completed_at"], NOW.isoformat())

    def test_persistence_failure_rolls_back(self):
        plan_id = self.plan.id
        with patch.object(workout_service.crud_workout_plan, "replace_workouts",
                          side_effect=OperationalError("UPDATE", {}, Exception("db down"))):
            with self.assertRaises(OperationalError):
                workout_service.set_item_checked(self.db, USER, plan_id, 0, True, now=NOW)

        stored = crud_workout_plan.get_plan(self.db, plan_id)
        self.assertFalse(stored.workouts[0]["checked"])
        self.assertIsNone(stored.workouts[0]["completed_at"])

    def test_other_users_plan_is_not_found(self):
        self.assertIsNone(workout_service.set_item_checked(self.db, "intruder", self.plan.id, 0, True, now=NOW))
        self.assertIsNone(workout_service.set_item_checked(self.db, USER, "no-such-plan", 0, True, now=NOW))

    def test_index_out_of_range(self):
        with self.assertRaises(ValueError):
            workout_service.set_item_checked(self.db, USER, self.plan.id, 2, True, now=NOW)
        with self.assertRaises(ValueError):
            workout_service.set_item_checked(self.db, USER, self.plan.id, -1, True, now=NOW)


class TestSyncLoggedExercises(WorkoutServiceTestCase):

    def test_logged_walk_completes_brisk_walking(self):
        self.store_plan(TODAY, [
            _item("Squats", "স্কোয়াট", 5, exercise_id="squats", type_="strength"),
            _item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk"),
        ])

        updated = workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "morning walk", "duration_minutes": 20}], now=NOW)

        self.assertEqual(updated, [1])
        item = crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts[1]
        self.assertTrue(item["checked"])
        self.assertEqual(item["completed_at"], NOW.isoformat())
        self.assertEqual(item["completed_duration"], 20)
        self.assertEqual(item["planned_duration"], 15)
        self.assertEqual(item["completion_percentage"], 100)

    def test_partial_duration_accumulates(self):
        self.store_plan(TODAY, [_item("Yoga Poses", "যোগাসন", 15, exercise_id="yoga", type_="flexibility")])

        workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "yoga", "duration_minutes": 10}], now=NOW)
        item = crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts[0]
        self.assertFalse(item["checked"])
        self.assertIsNone(item["completed_at"])
        self.assertEqual(item["completion_percentage"], 67)

        workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "yoga", "duration_minutes": 5}], now=NOW)
        item = crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts[0]
        self.assertTrue(item["checked"])
        self.assertEqual(item["completed_duration"], 15)
        self.assertEqual(item["completion_percentage"], 100)

    def test_only_first_unchecked_match_is_updated(self):
        self.store_plan(TODAY, [
            _item("Brisk Walking", "দ্রুত হাঁটা", 15, checked=True, exercise_id="brisk_walk"),
            _item("Walking Lunges", "", 5, type_="strength"),
            _item("Walk the Stairs", "", 10),
        ])

        updated = workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "walk", "duration_minutes": 30}], now=NOW)

        self.assertEqual(updated, [1])
        workouts = crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts
        self.assertTrue(workouts[1]["checked"])
        self.assertFalse(workouts[2]["checked"])
        self.assertNotIn("completed_duration", workouts[2])

    def test_bangla_name_matches(self):
        self.store_plan(TODAY, [_item("Swimming", "সাঁতার", 20, exercise_id="swimming", type_="sports")])
        updated = workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "সাঁতার", "duration_minutes": 25}], now=NOW)
        self.assertEqual(updated, [0])

    def test_no_match_leaves_plan_untouched(self):
        plan = self.store_plan(TODAY, [_item("Neck Rolls", "ঘাড় ঘোরানো", 3, exercise_id="neck_rolls")])
        before = plan.updated_at
        updated = workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "cricket", "duration_minutes": 30}], now=NOW)
        self.assertEqual(updated, [])
        self.assertEqual(crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).updated_at, before)

    def test_no_plan_today(self):
        self.assertEqual(workout_service.sync_logged_exercises(
            self.db, USER, TODAY, [{"exercise_name": "walk", "duration_minutes": 10}], now=NOW), [])

    def test_persistence_failure_rolls_back(self):
        plan_id = self.store_plan(TODAY, [_item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk")]).id

        with patch.object(workout_service.crud_workout_plan, "replace_workouts",
                          side_effect=OperationalError("UPDATE", {}, Exception("db down"))):
            with self.assertRaises(OperationalError):
                workout_service.sync_logged_exercises(
                    self.db, USER, TODAY, [{"exercise_name": "walk", "duration_minutes": 20}], now=NOW)

        item = crud_workout_plan.get_plan(self.db, plan_id).workouts[0]
        self.assertFalse(item["checked"])
        self.assertNotIn("completed_duration", item)


class TestRecordLoggedExercises(WorkoutServiceTestCase):

    def entries(self, name="morning walk", minutes=20):
        return [{
            "exercise_name": name, "exercise_type": "cardio", "duration_minutes": minutes,
            "calories_burned": 90.0, "intensity": "medium", "notes": None,
        }]

    def test_logs_and_plan_saved_together(self):
        self.store_plan(TODAY, [_item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk")])

        logs, synced = workout_service.record_logged_exercises(
            self.db, USER, TODAY, TODAY, self.entries(), now=NOW)

        self.assertEqual(synced, [0])
        self.assertEqual(len(logs), 1)
        self.assertIsNotNone(logs[0].id)
        self.assertTrue(crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts[0]["checked"])

    def test_backdated_logs_skip_plan(self):
        self.store_plan(TODAY, [_item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk")])

        logs, synced = workout_service.record_logged_exercises(
            self.db, USER, YESTERDAY, TODAY, self.entries(), now=NOW)

        self.assertEqual(synced, [])
        self.assertEqual(logs[0].log_date, YESTERDAY)
        self.assertFalse(crud_workout_plan.get_plan_for_date(self.db, USER, TODAY).workouts[0]["checked"])

    def test_sync_failure_discards_logs(self):
        plan_id = self.store_plan(TODAY, [_item("Brisk Walking", "দ্রুত হাঁটা", 15, exercise_id="brisk_walk")]).id

        with patch.object(workout_service.crud_workout_plan, "replace_workouts",
                          side_effect=OperationalError("UPDATE", {}, Exception("db down"))):
            with self.assertRaises(OperationalError):
                workout_service.record_logged_exercises(
                    self.db, USER, TODAY, TODAY, self.entries(), now=NOW)

        self.assertEqual(self.db.query(ExerciseLog).count(), 0)
        self.assertFalse(crud_workout_plan.get_plan(self.db, plan_id).workouts[0]["checked"])


if __name__ == '__main__':
    unittest.main()
