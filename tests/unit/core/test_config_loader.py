import unittest
import os
import yaml
from unittest.mock import patch, mock_open

from pydantic import ValidationError

from core.config_loader import (
    load_config,
    AppConfig,
    ScorerConfig,
    TeamFitConfig,
    ResultPolicy,
    OpportunityWeights,
)


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "matching": {
                "scorer": {
                    "weights": {"skills_match": 0.4, "urgency_bonus": 0.0},
                    "industry_compatibility": {"Energy": {"Utilities": 80}},
                },
                "result_policy": {"min_score": 60, "limit": 5},
            },
            "legal": {"default_compliance_cost": 90000},
            "web": {"host": "127.0.0.1", "port": 9000},
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_from_yaml(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.matching.scorer.weights.skills_match, 0.4)
                self.assertEqual(config.matching.scorer.weights.urgency_bonus, 0.0)
                # Unspecified weights keep their defaults
                self.assertEqual(config.matching.scorer.weights.industry_match, 0.20)
                self.assertEqual(config.matching.result_policy.min_score, 60)
                self.assertEqual(config.matching.result_policy.limit, 5)
                self.assertEqual(config.legal.default_compliance_cost, 90000)
                self.assertEqual(config.web.port, 9000)

    def test_industry_table_is_lowercased(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertEqual(config.matching.scorer.industry_compatibility, {"energy": {"utilities": 80}})

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            config = load_config("does_not_exist.yaml")
        self.assertEqual(config.matching.result_policy.min_score, 50)
        self.assertEqual(config.matching.result_policy.limit, 20)
        self.assertEqual(config.matching.result_policy.max_candidates, 100)
        self.assertEqual(config.web.host, "0.0.0.0")
        self.assertEqual(config.web.port, 8080)

    def test_empty_file_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.matching.scorer.weights.skills_match, 0.30)

    def test_env_var_override_web(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"WEB_HOST": "10.0.0.5", "WEB_PORT": "8181"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.web.host, "10.0.0.5")
                    self.assertEqual(config.web.port, 8181)

    def test_env_var_override_result_policy(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {"LIFTOUT_MIN_SCORE": "70", "LIFTOUT_LIMIT": "3"}):
                config = load_config("dummy_path.yaml")
                self.assertEqual(config.matching.result_policy.min_score, 70)
                self.assertEqual(config.matching.result_policy.limit, 3)

    def test_negative_weight_rejected(self):
        with self.assertRaises(ValidationError):
            OpportunityWeights(skills_match=-0.1)

    def test_min_score_out_of_range_rejected(self):
        with self.assertRaises(ValidationError):
            ResultPolicy(min_score=101)

    def test_production_defaults(self):
        scorer = ScorerConfig()
        weights = scorer.weights
        total_weight = (weights.skills_match + weights.industry_match + weights.location_match
                        + weights.size_match + weights.compensation_match
                        + weights.urgency_bonus + weights.company_quality)
        self.assertAlmostEqual(total_weight, 1.0)
        self.assertEqual(scorer.industry_compatibility['financial services']['fintech'], 90)
        self.assertEqual(scorer.urgency_scores['critical'], 100)
        self.assertEqual(TeamFitConfig().availability_scores['engaged'], 40)

    def test_repo_config_yaml_matches_defaults(self):
        """The example config.yaml at the project root loads and keeps production values."""
        root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
        with patch.dict(os.environ, {}, clear=False):
            for key in ("WEB_HOST", "WEB_PORT", "LIFTOUT_MIN_SCORE", "LIFTOUT_LIMIT"):
                os.environ.pop(key, None)
            config = load_config(os.path.join(root, "config.yaml"))
        self.assertEqual(config.matching.scorer, ScorerConfig())
        self.assertEqual(config.matching.team_fit, TeamFitConfig())
        self.assertEqual(config.matching.result_policy, ResultPolicy())


if __name__ == '__main__':
    unittest.main()
