"""Unit tests for methodutils.linearize."""

import unittest

from methodutils import (
    INWARD,
    OUTWARD,
    Direction,
    HostHierarchy,
    MethodUtilsError,
    VisitationRecord,
    build_record,
    linearize,
    visitation_order,
)


class Base1(object):
    pass


class Base2(object):
    pass


class Base3(object):
    pass


class Main1(Base1, Base2):
    pass


class Main2(Base2, Base3):
    pass


class TopLevel(Main1, Main2):
    pass


class Top(object):
    pass


class Left(Top):
    pass


class Right(Top):
    pass


class Bottom(Left, Right):
    pass


class TestVisitationRecord(unittest.TestCase):
    """Test cases for the VisitationRecord bookkeeping."""

    def test_append_returns_positions(self):
        record = VisitationRecord()
        self.assertEqual(record.append(Base1), 0)
        self.assertEqual(record.append(Base2), 1)
        self.assertEqual(record.sightings, 2)

    def test_invalidate_hides_entry(self):
        record = VisitationRecord()
        record.mark(Base1, record.append(Base1))
        record.mark(Base2, record.append(Base2))
        position = record.append(Base1)
        record.invalidate(record.position_of(Base1))
        record.mark(Base1, position)

        self.assertEqual(record.live(), [Base2, Base1])
        self.assertEqual(list(record), [Base2, Base1])
        self.assertEqual(len(record), 2)
        self.assertEqual(record.sightings, 3)
        self.assertEqual(record.position_of(Base1), 2)

    def test_invalidate_twice(self):
        record = VisitationRecord()
        record.append(Base1)
        record.invalidate(0)
        with self.assertRaises(MethodUtilsError):
            record.invalidate(0)

    def test_unseen(self):
        record = VisitationRecord()
        self.assertFalse(record.seen(Base1))
        self.assertIsNone(record.position_of(Base1))


class TestLinearize(unittest.TestCase):
    """Test cases for inward and outward linearization."""

    def test_inward_diamond(self):
        self.assertEqual(
            linearize(TopLevel, INWARD),
            [TopLevel, Main1, Base1, Main2, Base2, Base3],
        )

    def test_outward_diamond_raw(self):
        self.assertEqual(
            linearize(TopLevel, OUTWARD),
            [TopLevel, Main2, Base3, Main1, Base2, Base1],
        )

    def test_outward_diamond_visitation(self):
        self.assertEqual(
            visitation_order(TopLevel, OUTWARD),
            [Base1, Base2, Main1, Base3, Main2, TopLevel],
        )

    def test_inward_visitation_is_linearization(self):
        self.assertEqual(visitation_order(TopLevel, INWARD), linearize(TopLevel, INWARD))

    def test_direction_by_value(self):
        self.assertEqual(linearize(TopLevel, "inward"), linearize(TopLevel, Direction.INWARD))
        with self.assertRaises(ValueError):
            linearize(TopLevel, "sideways")

    def test_single_class(self):
        self.assertEqual(linearize(Base1, INWARD), [Base1])
        self.assertEqual(visitation_order(Base1, OUTWARD), [Base1])

    def test_classic_diamond(self):
        self.assertEqual(linearize(Bottom, INWARD), [Bottom, Left, Right, Top])
        self.assertEqual(visitation_order(Bottom, OUTWARD), [Top, Left, Right, Bottom])

    def test_root_first_and_unique(self):
        for direction in (INWARD, OUTWARD):
            classes = linearize(TopLevel, direction)
            self.assertIs(classes[0], TopLevel)
            self.assertEqual(len(classes), len(set(classes)))
            self.assertEqual(set(classes), {TopLevel, Main1, Main2, Base1, Base2, Base3})

    def test_subclasses_precede_superclasses(self):
        for root in (TopLevel, Bottom):
            inward = visitation_order(root, INWARD)
            outward = visitation_order(root, OUTWARD)
            for cls in inward:
                for base in cls.__bases__:
                    if base is object:
                        continue
                    self.assertLess(inward.index(cls), inward.index(base))
                    self.assertGreater(outward.index(cls), outward.index(base))

    def test_reconverging_class_sighted_twice(self):
        record = build_record(TopLevel, INWARD)
        # Base2 is reached through Main1 and again through Main2.
        self.assertEqual(record.sightings, 7)
        self.assertEqual(len(record), 6)

    def test_fresh_result_per_call(self):
        first = linearize(TopLevel, INWARD)
        first.append(None)
        self.assertEqual(linearize(TopLevel, INWARD), first[:-1])

    def test_superclasses_asked_once_per_class(self):
        asked = []

        class CountingHierarchy(HostHierarchy):
            def direct_superclasses(self, cls):
                asked.append(cls)
                return HostHierarchy.direct_superclasses(self, cls)

        linearize(TopLevel, INWARD, CountingHierarchy())
        self.assertEqual(sorted(asked, key=lambda c: c.__name__), sorted(
            [TopLevel, Main1, Main2, Base1, Base2, Base3], key=lambda c: c.__name__
        ))

    def test_object_included_on_request(self):
        hierarchy = HostHierarchy(exclude=())
        self.assertEqual(
            linearize(TopLevel, INWARD, hierarchy),
            [TopLevel, Main1, Base1, Main2, Base2, Base3, object],
        )
        self.assertEqual(visitation_order(TopLevel, OUTWARD, hierarchy)[0], object)


if __name__ == "__main__":
    unittest.main()
