"""
Integration tests for the section renderers.

Each renderer is exercised through the bundled Jinja2 templates.
"""

import pytest

from resumetex.contexts.templating.exceptions import TemplateRenderError
from resumetex.contexts.templating.latex_generator import ResumeLaTeXGenerator
from resumetex.contexts.templating.latex_patterns import SectionPatterns
from resumetex.contexts.templating.registries import TemplateRegistry
from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    PersonalInfo,
    ProjectRecord,
    SkillCategory,
    SkillCategoryName,
)


@pytest.fixture
def generator():
    return ResumeLaTeXGenerator()


@pytest.mark.integration
def test_heading(generator, personal_info):
    latex = generator.render_heading(personal_info)

    assert SectionPatterns.HEADING_BANNER in latex
    assert r"\textbf{\Huge \scshape Jane Doe}" in latex
    assert r"\small +1 555 0100 $|$ jane.doe@example.com" in latex
    assert r"\href{https://janedoe.dev}{\underline{Portfolio}}" in latex
    assert r"\href{https://github.com/janedoe}{\underline{GitHub}}" in latex
    assert "LeetCode" not in latex

    # Fixed link order
    assert latex.index("Portfolio") < latex.index("LinkedIn") < latex.index("GitHub")


@pytest.mark.integration
def test_heading_without_links(generator):
    latex = generator.render_heading(PersonalInfo(name="A_B", email="a@b.co"))

    assert r"\textbf{\Huge \scshape A\_B}" in latex
    assert r"\href" not in latex


@pytest.mark.integration
def test_education(generator, education):
    latex = generator.render_education(education)

    assert SectionPatterns.EDUCATION in latex
    assert r"{Texas A\&M University}{College Station, TX}" in latex
    assert "{B.S. in Computer Science}{Aug. 2019 -- May. 2023}" in latex
    assert r"\resumeSubSubheading{\textbf{GPA}: 3.9/4.0}{}" in latex
    assert "{M.S. in Computer Science}{Aug. 2023 -- Present}" in latex

    # Only the first record has a GPA
    assert latex.count("GPA") == 1
    assert latex.index("Texas A") < latex.index("Georgia Tech")


@pytest.mark.integration
def test_empty_sections_render_nothing(generator):
    assert generator.render_education([]) == ""
    assert generator.render_experience([]) == ""
    assert generator.render_projects([]) == ""
    assert generator.render_skills([]) == ""
    assert generator.render_achievements([]) == ""


@pytest.mark.integration
def test_experience(generator, experience):
    latex = generator.render_experience(experience)

    assert SectionPatterns.EXPERIENCE in latex
    assert "{Software Engineer}{Jun. 2023 -- Present}" in latex
    assert r"\resumeItem{Cut p99 latency by \textbf{40\%}}" in latex
    assert r"\resumeItem{Owned the billing\_service rollout}" in latex
    assert "{Intern}{May. 2022 -- Aug. 2022}" in latex

    # Whitespace-only bullet dropped
    assert latex.count(r"\resumeItem{") == 3


@pytest.mark.integration
def test_experience_without_bullets_has_no_item_list(generator, experience):
    experience[1].description = ["  "]
    latex = generator.render_experience(experience[1:])

    assert r"\resumeItemListStart" not in latex
    assert "{Globex}{Springfield, IL}" in latex


@pytest.mark.integration
def test_projects(generator, projects):
    latex = generator.render_projects(projects)

    assert SectionPatterns.PROJECTS in latex
    assert (
        r"{\textbf{Tic\_Tac\_Toe AI}}{\href{https://github.com/janedoe/tictactoe}{\underline{GitHub}}}"
        in latex
    )
    assert r"{Python, C\#}{}" in latex
    assert r"\resumeItem{Minimax with alpha-beta pruning}" in latex
    assert r"{\textbf{Budget Tracker}}{\href{https://budget.janedoe.dev}{\underline{Live}}}" in latex
    assert r"\resumeItem{Tracks monthly spending}" in latex


@pytest.mark.integration
def test_project_with_both_links(generator):
    project = ProjectRecord(
        title="Site",
        github_url="https://github.com/x/site",
        live_url="https://site.example",
    )
    latex = generator.render_projects([project])

    assert r"{\underline{GitHub}} $|$ \href{https://site.example}{\underline{Live}}" in latex
    assert r"\resumeItemListStart" not in latex


@pytest.mark.integration
def test_project_bullets_win_over_summary(generator):
    project = ProjectRecord(title="P", description=["Bullet"], summary="Summary")
    latex = generator.render_projects([project])

    assert r"\resumeItem{Bullet}" in latex
    assert "Summary" not in latex


@pytest.mark.integration
def test_skills_in_category_order(generator, skills):
    latex = generator.render_skills(skills)

    assert SectionPatterns.SKILLS in latex
    assert r"\textbf{Languages}{: Python, C++}" in latex
    assert r"\textbf{Tools \& Technologies}{: Git, Docker}" in latex
    assert "Cloud" not in latex
    assert latex.index("Languages") < latex.index("Tools")


@pytest.mark.integration
def test_skills_merges_repeated_categories(generator):
    latex = generator.render_skills(
        [
            SkillCategory(name=SkillCategoryName.DATABASE, skills=["PostgreSQL"]),
            SkillCategory(name=SkillCategoryName.DATABASE, skills=["", "Redis"]),
        ]
    )

    assert r"\textbf{Database}{: PostgreSQL, Redis}" in latex


@pytest.mark.integration
def test_skills_all_blank_omitted(generator):
    assert generator.render_skills([SkillCategory(name=SkillCategoryName.CLOUD, skills=[" "])]) == ""


@pytest.mark.integration
def test_achievements(generator, achievements):
    latex = generator.render_achievements(achievements + [AchievementEntry(title="  ")])

    assert SectionPatterns.ACHIEVEMENTS in latex
    assert r"\resumeItem{Hackathon Winner: Smart India Hackathon 2023}" in latex
    assert r"\resumeItem{Dean's List}" in latex
    assert latex.count(r"\resumeItem{") == 2


@pytest.mark.integration
def test_injected_formatters(education):
    generator = ResumeLaTeXGenerator(
        TemplateRegistry(),
        escape=lambda value: str(value).upper(),
        date_formatter=lambda value: "D",
    )
    latex = generator.render_education(education[:1])

    assert "{TEXAS A&M UNIVERSITY}" in latex
    assert "{D -- D}" in latex


@pytest.mark.integration
def test_broken_template_raises_render_error(tmp_path):
    type_dir = tmp_path / "types" / "education"
    type_dir.mkdir(parents=True)
    (type_dir / "template.tex.jinja").write_text("<<< records[0].no_such_field >>>")

    generator = ResumeLaTeXGenerator(TemplateRegistry(tmp_path))

    with pytest.raises(TemplateRenderError) as exc_info:
        generator.render_education([object()])

    assert exc_info.value.type_name == "education"
