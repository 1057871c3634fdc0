"""
Models Module
=============

This module contains the rating systems used to evaluate competitors in team games.

Included Rating Systems:
- TrueSkill: A Bayesian rating system developed by Microsoft, here comparing each team with its neighbours in the finishing order.

Each rating system is implemented as a class with methods for creating ratings, rating a match from the finishing ranks of its teams, and estimating match quality and win probability.
"""
