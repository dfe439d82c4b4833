#!/usr/bin/env python3
"""
Unit tests for the SQLAlchemy CapitalSource.

Tests the CapitalRepository methods against in-memory SQLite:
- add_seeker() / add_firm() / add_investor()
- get_seeker_by_id()
- list_providers()

and the capital_uow() / db_session_scope() transaction scopes.
"""

import unittest
from datetime import timedelta
from unittest.mock import patch

import pytest

from core.config_loader import MatchingConfig
from core.matching import IndividualInvestor, InvestmentFirm, MatchingService, Seeker
from database.database import db_session_scope, init_db
from database.models import InvestmentFirmModel, SeekerModel
from database.repositories import BaseRepository, CapitalRepository
from database.uow import capital_uow
from tests import create_test_session_factory
from tests.mocks.capital_mocks import REFERENCE_NOW

SEEKER_ROW = {
    "id": "seeker-1",
    "name": "PayFlow",
    "industries": ["fintech"],
    "description": "Fintech payments platform for small businesses",
    "stage": "Seed",
    "target_amount": 1_000_000,
    "location": "San Francisco, CA",
}

FIRM_ROW = {
    "id": "firm-1",
    "name": "Acme Ventures",
    "description": "Early-stage fund backing fintech payments platform companies",
    "sectors": ["Fintech"],
    "firm_type": "Venture Capital",
    "stages": ["seed", "series-a"],
    "check_size_min": 400_000,
    "check_size_max": 1_500_000,
    "hq_location": "San Francisco, CA",
    "portfolio_count": 20,
    "website": "https://acme.example",
    "created_at": REFERENCE_NOW - timedelta(days=400),
    "updated_at": REFERENCE_NOW - timedelta(days=45),
}


@pytest.mark.db
class TestCapitalRepository(unittest.TestCase):
    """CRUD and mapping against a fresh in-memory database per test."""

    def setUp(self):
        self.session_factory = create_test_session_factory()
        self.session = self.session_factory()
        self.repo = CapitalRepository(self.session)

    def tearDown(self):
        self.session.close()
        self.session_factory.kw["bind"].dispose()

    def test_01_add_and_get_seeker(self):
        print("\n🗄️  UNIT Test 1: Seeker Round Trip")

        row = self.repo.add_seeker(SEEKER_ROW)
        self.repo.commit()

        self.assertIsInstance(row, SeekerModel)
        seeker = self.repo.get_seeker_by_id("seeker-1")

        self.assertIsInstance(seeker, Seeker)
        self.assertEqual(seeker.name, "PayFlow")
        self.assertEqual(seeker.industries, ["fintech"])
        self.assertEqual(seeker.target, 1_000_000)
        print(f"  ✓ Loaded seeker: {seeker.name}")

    def test_02_missing_seeker(self):
        self.assertIsNone(self.repo.get_seeker_by_id("nope"))

    def test_03_generated_ids(self):
        row = self.repo.add_seeker({"name": "No Id Yet"})
        self.assertTrue(row.id)
        self.assertEqual(row.industries, [])

    def test_04_list_providers_firms_first(self):
        """Firms come before individuals; each group in creation order."""
        older = REFERENCE_NOW - timedelta(days=30)
        newer = REFERENCE_NOW - timedelta(days=5)

        self.repo.add_investor({"id": "inv-late", "first_name": "Late", "created_at": newer})
        self.repo.add_investor({"id": "inv-early", "first_name": "Early", "created_at": older})
        self.repo.add_firm({**FIRM_ROW, "id": "firm-new", "created_at": newer})
        self.repo.add_firm({**FIRM_ROW, "id": "firm-old", "created_at": older})
        self.repo.commit()

        providers = self.repo.list_providers()

        self.assertEqual([p.id for p in providers], ["firm-old", "firm-new", "inv-early", "inv-late"])
        self.assertIsInstance(providers[0], InvestmentFirm)
        self.assertIsInstance(providers[-1], IndividualInvestor)

    def test_05_firm_mapping(self):
        self.repo.add_firm(FIRM_ROW)
        self.repo.commit()

        firm = self.repo.list_providers()[0]

        self.assertEqual(firm.name, "Acme Ventures")
        self.assertEqual(firm.sectors, ["Fintech"])
        self.assertEqual(firm.stages, ["seed", "series-a"])
        self.assertEqual(firm.check_size_max, 1_500_000)
        self.assertIsNotNone(firm.updated_at)

    def test_06_investor_firm_link(self):
        self.repo.add_firm(FIRM_ROW)
        self.repo.add_investor({"id": "partner-1", "first_name": "Sam", "firm_id": "firm-1"})
        self.repo.commit()

        firm_row = self.session.get(InvestmentFirmModel, "firm-1")
        self.assertEqual([i.id for i in firm_row.investors], ["partner-1"])

        investor = [p for p in self.repo.list_providers() if isinstance(p, IndividualInvestor)][0]
        self.assertEqual(investor.firm_id, "firm-1")

    def test_07_matching_over_repository(self):
        """The repository satisfies the CapitalSource contract end to end."""
        print("\n🗄️  UNIT Test 7: Matching Over SQLite")

        self.repo.add_seeker(SEEKER_ROW)
        self.repo.add_firm(FIRM_ROW)
        self.repo.add_investor({"id": "partner-1", "first_name": "Sam", "firm_id": "firm-1"})
        self.repo.commit()

        results = MatchingService(self.repo, MatchingConfig()).run_matching("seeker-1", now=REFERENCE_NOW)

        self.assertEqual([r.firm_id for r in results], ["firm-1"])
        self.assertEqual(results[0].score, 90)
        print(f"  ✓ Score: {results[0].score}")


@pytest.mark.db
class TestTransactionScopes(unittest.TestCase):

    def setUp(self):
        self.session_factory = create_test_session_factory()

    def tearDown(self):
        self.session_factory.kw["bind"].dispose()

    def test_01_uow_commits(self):
        with capital_uow(self.session_factory) as repo:
            repo.add_seeker(SEEKER_ROW)

        with capital_uow(self.session_factory) as repo:
            self.assertIsNotNone(repo.get_seeker_by_id("seeker-1"))

    def test_02_uow_rolls_back_on_error(self):
        with self.assertRaises(RuntimeError):
            with capital_uow(self.session_factory) as repo:
                repo.add_seeker(SEEKER_ROW)
                raise RuntimeError("abort")

        with capital_uow(self.session_factory) as repo:
            self.assertIsNone(repo.get_seeker_by_id("seeker-1"))

    def test_03_uow_goes_through_repository_transaction_helpers(self):
        with patch.object(CapitalRepository, "commit", autospec=True, side_effect=BaseRepository.commit) as commit:
            with capital_uow(self.session_factory) as repo:
                repo.add_seeker(SEEKER_ROW)
        commit.assert_called_once_with(repo)

        with patch.object(CapitalRepository, "rollback", autospec=True, side_effect=BaseRepository.rollback) as rollback:
            with self.assertRaises(RuntimeError):
                with capital_uow(self.session_factory) as repo:
                    repo.add_firm(FIRM_ROW)
                    raise RuntimeError("abort")
        rollback.assert_called_once_with(repo)

        with capital_uow(self.session_factory) as repo:
            self.assertEqual([p.id for p in repo.list_providers()], [])
            self.assertIsNotNone(repo.get_seeker_by_id("seeker-1"))

    def test_04_writes_flush_through_repository(self):
        with patch.object(CapitalRepository, "flush", autospec=True, side_effect=BaseRepository.flush) as flush:
            with capital_uow(self.session_factory) as repo:
                repo.add_seeker(SEEKER_ROW)
                repo.add_firm(FIRM_ROW)
        self.assertEqual(flush.call_count, 2)

    def test_05_session_scope(self):
        with db_session_scope(self.session_factory) as session:
            session.add(SeekerModel(**SEEKER_ROW))

        with db_session_scope(self.session_factory) as session:
            self.assertEqual(session.query(SeekerModel).count(), 1)

    def test_06_init_db_is_idempotent(self):
        engine = self.session_factory.kw["bind"]
        init_db(engine)
        init_db(engine)

        with db_session_scope(self.session_factory) as session:
            self.assertEqual(session.query(SeekerModel).count(), 0)


if __name__ == '__main__':
    unittest.main()
