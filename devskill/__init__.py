"""devskill - solve DevSkill coding challenges from the terminal."""

__version__ = "1.0.0"
