import re
from typing import List

from applyly.core.text_normalization import clean_field_value

SKILL_DELIMITERS_RE = re.compile(r"[,•·|;/]")
MIN_SKILL_LENGTH = 2
MAX_SKILL_LENGTH = 50


def extract_skills(lines: List[str]) -> List[str]:
    """
    Split the skills section into individual skills.

    Delimiters are comma, bullet, middle dot, pipe, semicolon and slash.
    Pure numbers and tokens outside 2..50 characters are dropped; the first
    occurrence of a duplicate wins.

    Example:
        ["Python, SQL | Leadership", "SQL"] -> ["Python", "SQL", "Leadership"]
    """
    skills: List[str] = []
    for token in SKILL_DELIMITERS_RE.split(" ".join(lines)):
        skill = clean_field_value(re.sub(r"^[-–:]\s*", "", token.strip()), "text")
        if not (MIN_SKILL_LENGTH <= len(skill) <= MAX_SKILL_LENGTH):
            continue
        if skill.isdigit() or skill in skills:
            continue
        skills.append(skill)
    return skills
