import random
import unittest
from unittest import mock

import mongomock

import seed
from database import Database
from schemas import REVIEWS, CampgroundIn, ReviewIn
from seed_helpers import DESCRIPTORS, PLACES


class BuildCampgroundTest(unittest.TestCase):
    def test_fields(self):
        camp = seed.build_campground(random.Random(1))
        self.assertIsInstance(camp, CampgroundIn)
        descriptor, _, place = camp.title.partition(" ")
        self.assertIn(descriptor, DESCRIPTORS)
        self.assertIn(place, PLACES)
        self.assertIn(", ", camp.location)
        self.assertTrue(10 <= camp.price <= 29)
        self.assertEqual(seed.IMAGE_URL, camp.image)

    def test_reproducible(self):
        self.assertEqual(seed.build_campground(random.Random(7)), seed.build_campground(random.Random(7)))


class SeedTest(unittest.TestCase):
    def setUp(self):
        self.db = Database(mongomock.MongoClient(), "yelp-camp-test")

    def test_replaces_existing_data(self):
        old_id = self.db.create_campground(seed.build_campground(random.Random()))
        self.db.add_review(old_id, ReviewIn(body="old", rating=3))

        self.assertEqual(12, seed.seed(self.db, 12, random.Random(0)))
        campgrounds = self.db.list_campgrounds()
        self.assertEqual(12, len(campgrounds))
        self.assertNotIn(old_id, [c.id for c in campgrounds])
        self.assertEqual(0, self.db.db[REVIEWS].count_documents({}))

    def test_main_closes_connection(self):
        with mock.patch.object(seed.Database, "connect", return_value=self.db), \
                mock.patch.object(self.db, "close") as close:
            self.assertEqual(0, seed.main(["--count", "3", "--seed", "1"]))
        close.assert_called_once()
        self.assertEqual(3, len(self.db.list_campgrounds()))

    def test_main_reports_failure(self):
        with mock.patch.object(seed.Database, "connect", return_value=self.db), \
                mock.patch.object(self.db, "close"), \
                mock.patch.object(self.db, "clear_campgrounds", side_effect=RuntimeError("offline")):
            self.assertEqual(1, seed.main(["--count", "1"]))


if __name__ == '__main__':
    unittest.main()
