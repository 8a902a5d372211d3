"""
LaTeX template generation for resume sections.

This module contains the fixed document boilerplate and one builder per
resume section. Builders return fragments (not standalone documents) and run
every user-supplied value, link targets included, through escape_latex.
The markup follows Jake Gutierrez's single-column resume template.
"""

from __future__ import annotations

from typing import List, Sequence

from resume_generator.latex.core import escape_latex, filter_bullets, href, is_blank
from resume_generator.schema import (
    Education,
    Leadership,
    PersonalInfo,
    Project,
    TechnicalSkills,
    WorkExperience,
)

SEPARATOR = " $|$ "

PREAMBLE = r"""%-------------------------
% Resume in Latex
% Based on template by: Jake Gutierrez
% Inspired by: https://github.com/sb2nov/resume
% License : MIT
%------------------------

\documentclass[letterpaper,11pt]{article}

\usepackage{latexsym}
\usepackage[empty]{fullpage}
\usepackage{titlesec}
\usepackage{marvosym}
\usepackage[usenames,dvipsnames]{color}
\usepackage{verbatim}
\usepackage{enumitem}
\usepackage[hidelinks]{hyperref}
\usepackage{fancyhdr}
\usepackage[english]{babel}
\usepackage{tabularx}
\usepackage{fontawesome5}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\input{glyphtounicode}

\pagestyle{fancy}
\fancyhf{} % clear all header and footer fields
\fancyfoot{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}

% Adjust margins
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}

\urlstyle{same}

\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}

% Sections formatting
\titleformat{\section}{
  \vspace{-4pt}\scshape\raggedright\large
}{}{0em}{}[\color{black}\titlerule \vspace{-5pt}]

% Ensure that generate pdf is machine readable/ATS parsable
\pdfgentounicode=1

%-------------------------
% Custom commands
\newcommand{\resumeItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}

\newcommand{\resumeSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}

\newcommand{\resumeSubSubheading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \textit{\small#1} & \textit{\small #2} \\
    \end{tabular*}\vspace{-7pt}
}

\newcommand{\resumeProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}

\newcommand{\resumeSubItem}[1]{\resumeItem{#1}\vspace{-4pt}}

\renewcommand\labelitemii{$\vcenter{\hbox{\tiny$\bullet$}}$}

\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}

%-------------------------------------------
%%%%%%  RESUME STARTS HERE  %%%%%%%%%%%%%%%%%%%%%%%%%%%%

\begin{document}
"""

CLOSING = "\n\\end{document}\n"


def _date_range(start: str, end: str) -> str:
    return f"{escape_latex(start)} -- {escape_latex(end)}"


def build_item_list(items: Sequence[str], indent: str = "      ") -> List[str]:
    """Bullet list lines for one entry.

    Blank bullets are dropped. An entry with no bullets left still gets an
    (empty) item list so its heading renders the same way.
    """
    lines = [f"{indent}\\resumeItemListStart"]
    for item in filter_bullets(items):
        lines.append(f"{indent}  \\resumeItem{{{escape_latex(item)}}}")
    lines.append(f"{indent}\\resumeItemListEnd")
    return lines


def build_header(info: PersonalInfo) -> str:
    """Build the centered heading: name and contact links.

    LinkedIn and GitHub are always linked; the portfolio link and the
    location only appear when filled in.
    """
    contact = [f"\\small \\faPhone\\ {escape_latex(info.phone)}"]
    if not is_blank(info.location):
        contact.append(f"\\faMapMarker\\ {escape_latex(info.location)}")
    contact.append(href(f"mailto:{info.email}", f"\\faEnvelope\\ {escape_latex(info.email)}"))

    links = [
        href(info.linkedin_url, "\\faLinkedin\\ LinkedIn"),
        href(info.github_url, "\\faGithub\\ GitHub"),
    ]
    if not is_blank(info.portfolio_url):
        links.append(href(info.portfolio_url, "\\faBriefcase\\ Portfolio"))

    lines = [
        "",
        "%----------HEADING----------",
        "\\begin{center}",
        f"    \\textbf{{\\Huge \\scshape {escape_latex(info.full_name)}}} \\\\[8pt]",
        f"    {SEPARATOR.join(contact)} $|$",
        f"    {SEPARATOR.join(links)}",
        "\\end{center}",
    ]
    return "\n".join(lines) + "\n"


def build_education_section(education: Education) -> str:
    """Build the education section (always exactly one entry)."""
    degree = escape_latex(education.degree)
    if not is_blank(education.minor):
        degree += f", Minor in {escape_latex(education.minor)}"
    if not is_blank(education.gpa):
        degree += f" (GPA: {escape_latex(education.gpa)})"

    lines = [
        "",
        "%-----------EDUCATION-----------",
        "\\section{Education}",
        "  \\resumeSubHeadingListStart",
        "    \\resumeSubheading",
        f"      {{{escape_latex(education.university_name)}}}{{{escape_latex(education.location)}}}",
        f"      {{{degree}}}{{{escape_latex(education.expected_graduation)}}}",
    ]
    extras = (
        ("Relevant Courses:", education.relevant_courses),
        ("Honors/Achievements:", education.honors),
    )
    for label, value in extras:
        if is_blank(value):
            continue
        lines.extend([
            "      \\resumeItemListStart",
            f"        \\resumeItem{{\\textbf{{{label}}} {escape_latex(value)}}}",
            "      \\resumeItemListEnd",
        ])
    lines.append("  \\resumeSubHeadingListEnd")
    return "\n".join(lines) + "\n"


def build_experience_entry(exp: WorkExperience) -> List[str]:
    """Lines for a single work experience entry."""
    lines = [
        "    \\resumeSubheading",
        f"      {{{escape_latex(exp.company_name)}}}{{{escape_latex(exp.location)}}}",
        f"      {{{escape_latex(exp.position)}}}{{{_date_range(exp.start_date, exp.end_date)}}}",
    ]
    lines.extend(build_item_list(exp.achievements))
    return lines


def build_experience_section(experiences: Sequence[WorkExperience]) -> str:
    """Build the experience section, or "" when there are no entries."""
    if not experiences:
        return ""

    lines = [
        "",
        "%-----------EXPERIENCE-----------",
        "\\section{Experience}",
        "  \\resumeSubHeadingListStart",
    ]
    for exp in experiences:
        lines.extend(build_experience_entry(exp))
    lines.append("  \\resumeSubHeadingListEnd")
    return "\n".join(lines) + "\n"


def build_project_entry(project: Project) -> List[str]:
    """Lines for a single project: bold name, optional links, technologies."""
    heading = f"\\textbf{{{escape_latex(project.name)}}}"
    links = []
    if not is_blank(project.website_url):
        links.append(href(project.website_url, "Website"))
    if not is_blank(project.source_code_url):
        links.append(href(project.source_code_url, "Source"))
    if links:
        heading += SEPARATOR + SEPARATOR.join(links)

    lines = [
        "      \\resumeProjectHeading",
        f"          {{{heading}}}{{{escape_latex(project.technologies)}}}",
    ]
    lines.extend(build_item_list(project.description, indent="          "))
    return lines


def build_projects_section(projects: Sequence[Project]) -> str:
    """Build the projects section, or "" when there are no entries."""
    if not projects:
        return ""

    lines = [
        "",
        "%-----------PROJECTS-----------",
        "\\section{Projects}",
        "    \\resumeSubHeadingListStart",
    ]
    for project in projects:
        lines.extend(build_project_entry(project))
    lines.append("    \\resumeSubHeadingListEnd")
    return "\n".join(lines) + "\n"


def build_leadership_entry(lead: Leadership) -> List[str]:
    """Lines for a single leadership entry; each non-blank url becomes a "Link"."""
    heading = escape_latex(lead.organization_name)
    links = [href(url, "Link") for url in filter_bullets(lead.urls)]
    if links:
        heading += SEPARATOR + SEPARATOR.join(links)

    lines = [
        "      \\resumeSubheading",
        f"        {{{heading}}}{{{_date_range(lead.start_date, lead.end_date)}}}",
        f"        {{{escape_latex(lead.role)}}}{{}}",
    ]
    lines.extend(build_item_list(lead.achievements, indent="        "))
    return lines


def build_leadership_section(leadership: Sequence[Leadership]) -> str:
    """Build the leadership section, or "" when there are no entries."""
    if not leadership:
        return ""

    lines = [
        "",
        "%-----------LEADERSHIP-----------",
        "\\section{Leadership \\& Extracurricular Activities}",
        "    \\resumeSubHeadingListStart",
    ]
    for lead in leadership:
        lines.extend(build_leadership_entry(lead))
    lines.append("    \\resumeSubHeadingListEnd")
    return "\n".join(lines) + "\n"


def build_skills_section(skills: TechnicalSkills) -> str:
    """Build the technical skills section.

    All three lines are always present; an empty value leaves just the label.
    """
    lines = [
        "",
        "%-----------TECHNICAL SKILLS-----------",
        "\\section{Technical Skills}",
        " \\begin{itemize}[leftmargin=0.15in, label={}]",
        "    \\small{\\item{",
        f"     \\textbf{{Programming Languages}}{{: {escape_latex(skills.programming_languages)}}} \\\\",
        f"     \\textbf{{Developer Tools}}{{: {escape_latex(skills.developer_tools)}}} \\\\",
        f"     \\textbf{{Libraries/Frameworks}}{{: {escape_latex(skills.libraries_frameworks)}}}",
        "    }}",
        " \\end{itemize}",
    ]
    return "\n".join(lines) + "\n"
