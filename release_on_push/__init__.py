"""Release notes from the commits pushed since the last GitHub release."""
