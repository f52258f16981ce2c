"""
SCI-90 questionnaire package.

Design intent:
- Keep the scoring engine a pure function over static questionnaire tables.
- Keep transport and storage concerns outside the domain modules.
"""
