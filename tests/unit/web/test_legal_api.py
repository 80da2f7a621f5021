#!/usr/bin/env python3
"""
Unit tests for the legal endpoints.
"""

import unittest

import pytest
from fastapi.testclient import TestClient

from core.config_loader import LegalConfig
from web.backend.app import create_app
from web.backend.dependencies import get_legal_config
from web.backend.services.legal_service import LegalService


@pytest.mark.api
class TestLegalEndpoints(unittest.TestCase):

    def setUp(self):
        self.app = create_app()
        self.app.dependency_overrides[get_legal_config] = lambda: LegalConfig()
        self.client = TestClient(self.app)

    def tearDown(self):
        self.app.dependency_overrides.clear()

    def test_non_compete(self):
        response = self.client.post("/api/legal/non-compete", json={
            "terms": {
                "teamMemberId": "u1",
                "duration": 12,
                "geographicScope": "State of New York",
                "industryScope": ["finance"],
                "compensation": 0,
                "currentSalary": 240000,
            },
            "jurisdiction": "New York",
        })

        self.assertEqual(response.status_code, 200)
        analysis = response.json()['analysis']
        self.assertEqual(analysis['violationRisk'], "prohibitive")
        self.assertEqual(analysis['enforceability']['enforcementLikelihood'], 90)
        self.assertEqual(analysis['nonCompeteTerms']['geographicScope'], "state of new york")
        self.assertEqual(analysis['mitigationOptions'][0]['cost'], 240000)

    def test_non_compete_requires_jurisdiction(self):
        response = self.client.post("/api/legal/non-compete", json={"terms": {}, "jurisdiction": ""})
        self.assertEqual(response.status_code, 422)

    def test_compliance_cost(self):
        response = self.client.post("/api/legal/compliance-cost", json={
            "jurisdiction": "New York",
            "teamSize": 5,
            "liftoutType": "competitive",
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "success": True,
            "jurisdiction": "New York",
            "teamSize": 5,
            "liftoutType": "competitive",
            "cost": 300000,
        })

    def test_compliance_cost_defaults(self):
        response = self.client.post("/api/legal/compliance-cost", json={"jurisdiction": "Atlantis"})
        self.assertEqual(response.json()['cost'], 100000)

    def test_compliance_cost_rejects_zero_team(self):
        response = self.client.post("/api/legal/compliance-cost", json={"jurisdiction": "Texas", "teamSize": 0})
        self.assertEqual(response.status_code, 422)


class TestLegalService(unittest.TestCase):

    def test_service_payloads(self):
        service = LegalService()
        result = service.analyze_non_compete({"duration": 18}, "Texas")
        self.assertTrue(result['success'])
        self.assertEqual(result['analysis']['enforceability']['jurisdiction'], "Texas")

        cost = service.compliance_cost("California", 3, "expansion")
        # 50000 * 1.3 * 1.2
        self.assertEqual(cost['cost'], 78000)


if __name__ == '__main__':
    unittest.main()
