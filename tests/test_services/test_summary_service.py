import unittest
from datetime import date
from types import SimpleNamespace as Obj

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base
from worker.models import Worker
from assignment.models import ShiftAssignment, ShiftType
from assignment import service as assignment_service
from assignment.schema import AssignShift
from summary import service


class SummarizeMonthTests(unittest.TestCase):
    """The pure fold, fed plain objects."""

    def setUp(self):
        self.workers = [
            Obj(id=2, name="Zed", code="EMP002"),
            Obj(id=1, name="Ann", code="EMP001"),
            Obj(id=3, name="Ann", code="EMP003"),
        ]

    def test_workers_without_assignments_get_zero_rows(self):
        rows = service.summarize_month(self.workers, [])
        self.assertEqual(len(rows), 3)
        for r in rows:
            self.assertEqual(r.total_shifts, 0)
            self.assertEqual(
                (r.s1_count, r.s2_count, r.s3_count, r.s4_count, r.s5_count), (0, 0, 0, 0, 0)
            )
            self.assertEqual(r.total_amount, 0)

    def test_ordered_by_name_then_id(self):
        rows = service.summarize_month(self.workers, [])
        self.assertEqual([r.worker_id for r in rows], [1, 3, 2])

    def test_counts_and_amount_per_type(self):
        assignments = [
            Obj(worker_id=1, shift_type="S1"),
            Obj(worker_id=1, shift_type="S2"),
            Obj(worker_id=1, shift_type="S3"),
            Obj(worker_id=1, shift_type="S4"),
            Obj(worker_id=1, shift_type="S5"),
            Obj(worker_id=1, shift_type="S5"),
            Obj(worker_id=2, shift_type="S3"),
        ]
        rows = {r.worker_id: r for r in service.summarize_month(self.workers, assignments)}

        ann = rows[1]
        self.assertEqual(ann.total_shifts, 6)
        self.assertEqual(ann.s5_count, 2)
        self.assertEqual(ann.total_amount, 400 + 300 + 900 + 500 + 600 * 2)

        zed = rows[2]
        self.assertEqual(zed.total_shifts, 1)
        self.assertEqual(zed.s3_count, 1)
        self.assertEqual(zed.total_amount, 900)

        self.assertEqual(rows[3].total_amount, 0)

    def test_unknown_tags_count_toward_nothing(self):
        assignments = [
            Obj(worker_id=1, shift_type="S9"),
            Obj(worker_id=1, shift_type=""),
            Obj(worker_id=1, shift_type="s1"),
            Obj(worker_id=1, shift_type="S1"),
        ]
        ann = service.summarize_month(self.workers, assignments)[0]
        self.assertEqual(ann.total_shifts, 1)
        self.assertEqual(ann.s1_count, 1)
        self.assertEqual(ann.total_amount, 400)

    def test_assignments_for_unlisted_workers_ignored(self):
        rows = service.summarize_month(self.workers, [Obj(worker_id=42, shift_type="S1")])
        self.assertEqual(sum(r.total_shifts for r in rows), 0)

    def test_custom_rate_table(self):
        rates = {ShiftType.S1: 7}
        rows = service.summarize_month(
            self.workers,
            [Obj(worker_id=1, shift_type="S1"), Obj(worker_id=1, shift_type="S2")],
            rates=rates,
        )
        self.assertEqual(rows[0].total_amount, 7)
        self.assertEqual(rows[0].total_shifts, 2)

    def test_get_rates(self):
        self.assertEqual(
            service.get_rates(), {"S1": 400, "S2": 300, "S3": 900, "S4": 500, "S5": 600}
        )


class MonthlySummaryServiceTests(unittest.TestCase):
    def setUp(self):
        # Fresh in-memory DB
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        Session = sessionmaker(bind=self.engine, future=True)
        self.db = Session()

        self.jane = Worker(name="Jane Smith", code="EMP002")
        self.idle = Worker(name="Anna Martinez", code="EMP010")
        self.db.add_all([self.jane, self.idle])
        self.db.commit()
        self.jane_id = self.jane.id
        self.idle_id = self.idle.id

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _assign(self, day, shift_type):
        assignment_service.assign_shift(
            self.db, AssignShift(worker_id=self.jane_id, date=day, shift_type=shift_type)
        )

    def test_two_s3_shifts_in_march(self):
        self._assign(date(2024, 3, 1), ShiftType.S3)
        self._assign(date(2024, 3, 2), ShiftType.S3)

        rows = service.get_monthly_summary(self.db, year=2024, month=3)
        self.assertEqual([r.name for r in rows], ["Anna Martinez", "Jane Smith"])

        jane = rows[1]
        self.assertEqual(jane.total_shifts, 2)
        self.assertEqual(jane.s3_count, 2)
        self.assertEqual((jane.s1_count, jane.s2_count, jane.s4_count, jane.s5_count), (0, 0, 0, 0))
        self.assertEqual(jane.total_amount, 1800)

        idle = rows[0]
        self.assertEqual(idle.worker_id, self.idle_id)
        self.assertEqual(idle.total_shifts, 0)
        self.assertEqual(idle.total_amount, 0)

    def test_overwrite_and_clear_reflected(self):
        self._assign(date(2024, 3, 1), ShiftType.S1)
        self._assign(date(2024, 3, 1), ShiftType.S2)
        self._assign(date(2024, 3, 2), ShiftType.S5)
        self._assign(date(2024, 3, 2), None)

        jane = service.get_monthly_summary(self.db, year=2024, month=3)[1]
        self.assertEqual(jane.total_shifts, 1)
        self.assertEqual(jane.s1_count, 0)
        self.assertEqual(jane.s2_count, 1)
        self.assertEqual(jane.total_amount, 300)

    def test_other_months_excluded(self):
        self._assign(date(2023, 2, 28), ShiftType.S4)
        self._assign(date(2023, 3, 1), ShiftType.S4)

        feb = service.get_monthly_summary(self.db, year=2023, month=2)
        jane = next(r for r in feb if r.worker_id == self.jane_id)
        self.assertEqual(jane.s4_count, 1)
        self.assertEqual(jane.total_amount, 500)

    def test_legacy_unknown_tag_rows_ignored(self):
        self.db.add(ShiftAssignment(worker_id=self.jane_id, date=date(2024, 3, 4), shift_type="NIGHT"))
        self.db.commit()
        self._assign(date(2024, 3, 5), ShiftType.S1)

        jane = service.get_monthly_summary(self.db, year=2024, month=3)[1]
        self.assertEqual(jane.total_shifts, 1)
        self.assertEqual(jane.total_amount, 400)


if __name__ == "__main__":
    unittest.main()
