"""LifeTrack Insights — analytics core for workout and nutrition logs."""
