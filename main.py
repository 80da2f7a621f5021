import json
import logging
import sys
import argparse

from core.config_loader import load_config
from core.scorer import MatchScorer, TeamFitScorer
from web.backend.exceptions import InvalidRequestException
from web.backend.services.match_service import MatchService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


def load_json(path):
    """Read a JSON fixture file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def as_list(data, key):
    """Accept either a bare list or an object wrapping the list under key."""
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        logger.warning(f"Expected a list of {key}, got {type(data).__name__}")
        return []
    return data


def run_score(args, config):
    policy = config.matching.result_policy
    service = MatchService(scorer=MatchScorer(config.matching.scorer, policy))
    result = service.find_opportunities(
        load_json(args.team),
        as_list(load_json(args.opportunities), "opportunities"),
        min_score=policy.min_score if args.min_score is None else args.min_score,
        limit=policy.limit if args.limit is None else args.limit
    )
    logger.info(f"Found {result['data']['total']} matching opportunities")
    return result


def run_teams(args, config):
    policy = config.matching.result_policy
    service = MatchService(team_fit_scorer=TeamFitScorer(config.matching.team_fit, policy))
    result = service.find_teams(
        load_json(args.opportunity),
        as_list(load_json(args.teams), "teams"),
        min_score=policy.min_score if args.min_score is None else args.min_score,
        limit=policy.limit if args.limit is None else args.limit
    )
    logger.info(f"Found {result['data']['total']} matching teams")
    return result


def build_parser():
    parser = argparse.ArgumentParser(description="Liftout match scoring")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Rank opportunities for a team")
    score_parser.add_argument("--team", required=True, help="Team JSON file")
    score_parser.add_argument("--opportunities", required=True, help="Opportunities JSON file")

    teams_parser = subparsers.add_parser("teams", help="Rank teams for an opportunity")
    teams_parser.add_argument("--opportunity", required=True, help="Opportunity JSON file")
    teams_parser.add_argument("--teams", required=True, help="Teams JSON file")

    for sub in (score_parser, teams_parser):
        sub.add_argument("--min-score", type=int, default=None, help="Minimum total score (0-100)")
        sub.add_argument("--limit", type=int, default=None, help="Maximum results")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    try:
        if args.command == "score":
            result = run_score(args, config)
        else:
            result = run_teams(args, config)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read input: {e}")
        return 1
    except InvalidRequestException as e:
        logger.error(f"Invalid input: {e}")
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
