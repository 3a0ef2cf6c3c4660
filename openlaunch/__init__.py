"""OpenLaunch list, feed and leaderboard API."""
