"""Dataset loaders for the nflverse release repositories."""

from .downloader import Downloader, build_url, download_dataframe, download_nflverse
from .ffverse import load_ff_opportunity, load_ff_playerids, load_ff_rankings
from .reference import (
    load_combine,
    load_contracts,
    load_draft_picks,
    load_officials,
    load_players,
    load_teams,
    load_trades,
)
from .rosters import (
    load_depth_charts,
    load_injuries,
    load_rosters,
    load_rosters_weekly,
    load_snap_counts,
)
from .schedules import load_schedules
from .seasons import Seasons, resolve_seasons, resolve_seasons_roster
from .stats import (
    load_ftn_charting,
    load_nextgen_stats,
    load_participation,
    load_pbp,
    load_pfr_advstats,
    load_player_stats,
    load_team_stats,
)

# Loaders by dataset name, used by the command line interface
LOADERS = {
    "combine": load_combine,
    "contracts": load_contracts,
    "depth_charts": load_depth_charts,
    "draft_picks": load_draft_picks,
    "ff_opportunity": load_ff_opportunity,
    "ff_playerids": load_ff_playerids,
    "ff_rankings": load_ff_rankings,
    "ftn_charting": load_ftn_charting,
    "injuries": load_injuries,
    "nextgen_stats": load_nextgen_stats,
    "officials": load_officials,
    "participation": load_participation,
    "pbp": load_pbp,
    "pfr_advstats": load_pfr_advstats,
    "player_stats": load_player_stats,
    "players": load_players,
    "rosters": load_rosters,
    "rosters_weekly": load_rosters_weekly,
    "schedules": load_schedules,
    "snap_counts": load_snap_counts,
    "team_stats": load_team_stats,
    "teams": load_teams,
    "trades": load_trades,
}
