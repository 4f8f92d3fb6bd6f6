"""Ticklist - personal task tracker."""
