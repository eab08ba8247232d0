#!/usr/bin/env python3
"""
Topic classifier tests.

TEST COVERAGE:
    - Region detection for registration and polling questions
    - Party detection (APC checked before PDP)
    - Rule ordering and the general fallback
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from backend.nlu.rules import classify_topic, detect_region


class TestClassifyTopic(unittest.TestCase):

    def test_register_without_region_is_general(self):
        for text in ["How do I register?", "REGISTER me", "voter registration info"]:
            self.assertEqual(classify_topic(text), ("registration", "general"))

    def test_register_in_lagos(self):
        self.assertEqual(classify_topic("How do I register in Lagos?"), ("registration", "lagos"))

    def test_polling_in_lagos(self):
        self.assertEqual(classify_topic("Where is my polling unit in LAGOS"), ("polling station", "lagos"))

    def test_station_and_vote_map_to_polling(self):
        self.assertEqual(classify_topic("which station in Kano?"), ("polling station", "kano"))
        self.assertEqual(classify_topic("When can I vote in Abuja"), ("polling station", "abuja"))

    def test_registration_wins_over_polling(self):
        self.assertEqual(classify_topic("register to vote in rivers"), ("registration", "rivers"))

    def test_first_listed_region_wins(self):
        self.assertEqual(classify_topic("register in kano or lagos"), ("registration", "lagos"))

    def test_party_with_both_names_prefers_apc(self):
        self.assertEqual(classify_topic("compare the pdp and apc party"), ("party platform", "APC"))

    def test_party_pdp(self):
        self.assertEqual(classify_topic("What is the PDP platform?"), ("party platform", "PDP"))

    def test_party_without_name_is_general(self):
        self.assertEqual(classify_topic("party platforms?"), ("party platform", "general"))

    def test_party_ignores_region(self):
        self.assertEqual(classify_topic("party platform in lagos"), ("party platform", "general"))

    def test_unmatched_text_is_general(self):
        self.assertEqual(classify_topic("hello there"), ("general", "general"))
        self.assertEqual(classify_topic(""), ("general", "general"))

    def test_detect_region_default(self):
        self.assertEqual(detect_region("Enugu"), "general")


if __name__ == '__main__':
    unittest.main()
