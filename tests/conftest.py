"""Shared resume records for templating and rendering tests."""

import pytest
from loguru import logger

from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    EducationRecord,
    ExperienceRecord,
    PersonalInfo,
    ProfileLinks,
    ProjectRecord,
    ResumeData,
    SkillCategory,
    SkillCategoryName,
)


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """CLI tests install file/console sinks; drop them so later tests start clean."""
    yield
    logger.remove()


@pytest.fixture
def personal_info():
    return PersonalInfo(
        name="Jane Doe",
        email="jane.doe@example.com",
        phone="+1 555 0100",
        links=ProfileLinks(
            portfolio="https://janedoe.dev",
            linkedin="https://linkedin.com/in/janedoe",
            github="https://github.com/janedoe",
        ),
    )


@pytest.fixture
def education():
    return [
        EducationRecord(
            institution="Texas A&M University",
            institution_location="College Station, TX",
            degree="B.S.",
            field_of_study="Computer Science",
            start_date="2019-08-20",
            end_date="2023-05-12",
            gpa="3.9/4.0",
        ),
        EducationRecord(
            institution="Georgia Tech",
            institution_location="Atlanta, GA",
            degree="M.S.",
            field_of_study="Computer Science",
            start_date="2023-08-21",
            is_current=True,
        ),
    ]


@pytest.fixture
def experience():
    return [
        ExperienceRecord(
            company_name="Acme Corp",
            company_location="Remote",
            position="Software Engineer",
            start_date="2023-06-01",
            is_current=True,
            description=["Cut p99 latency by **40%**", "   ", "Owned the billing_service rollout"],
        ),
        ExperienceRecord(
            company_name="Globex",
            company_location="Springfield, IL",
            position="Intern",
            start_date="2022-05-16",
            end_date="2022-08-12",
            description=["Built dashboards"],
        ),
    ]


@pytest.fixture
def projects():
    return [
        ProjectRecord(
            title="Tic_Tac_Toe AI",
            description=["Minimax with alpha-beta pruning", ""],
            technologies=["Python", "C#"],
            github_url="https://github.com/janedoe/tictactoe",
        ),
        ProjectRecord(
            title="Budget Tracker",
            technologies=["React", "Node.js"],
            live_url="https://budget.janedoe.dev",
            summary="Tracks monthly spending",
        ),
    ]


@pytest.fixture
def skills():
    return [
        SkillCategory(name=SkillCategoryName.TOOLS, skills=["Git", "Docker"]),
        SkillCategory(name=SkillCategoryName.LANGUAGES, skills=["Python", "C++"]),
        SkillCategory(name=SkillCategoryName.CLOUD, skills=[]),
    ]


@pytest.fixture
def achievements():
    return [
        AchievementEntry.from_text("Hackathon Winner: Smart India Hackathon 2023"),
        AchievementEntry.from_text("Dean's List"),
    ]


@pytest.fixture
def resume_data(personal_info, education, experience, projects, skills, achievements):
    return ResumeData(
        personal_info=personal_info,
        education=education,
        experience=experience,
        projects=projects,
        skills=skills,
        achievements=achievements,
    )


@pytest.fixture
def caplog_loguru():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
