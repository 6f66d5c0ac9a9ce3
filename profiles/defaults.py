# Boilerplate documents used when a response section is missing.

MAIN_PROMPT_DEFAULT = """Build the application described above using the selected technology stack.

- Clarify the objective and the main user flows before writing code
- Use the latest stable versions of the specified technologies
- Follow the conventions of each framework and keep the code well organized
- Include error handling, tests and documentation for the important paths"""

_PROJECT_GUIDELINES_BODY = """## Project Overview
AI-generated coding project with modern development practices.

## Technology Stack
- Use the latest stable versions of specified technologies
- Follow modern framework patterns and conventions
- Implement responsive design principles

## Coding Guidelines
- Write clean, maintainable, and well-documented code
- Use modern syntax and patterns
- Implement proper error handling
- Follow established project conventions
- Ensure type safety where applicable

## Code Style Preferences
- Use consistent indentation and formatting
- Follow naming conventions for variables, functions, and files
- Organize imports and dependencies logically
- Write descriptive comments for complex logic

## Testing Requirements
- Implement comprehensive unit tests
- Use appropriate testing frameworks
- Maintain good test coverage
- Write integration tests for critical paths

## Performance Considerations
- Optimize for speed and efficiency
- Implement caching where appropriate
- Minimize bundle size and load times
- Use performance monitoring tools"""

_WORKFLOW_GUIDELINES_BODY = """## Development Workflow
1. Follow git best practices with descriptive commit messages
2. Use feature branches for new development
3. Conduct code reviews before merging
4. Maintain clean and organized project structure

## Common Patterns
- Use consistent file and folder naming conventions
- Implement reusable components and utilities
- Follow established architectural patterns
- Maintain separation of concerns

## Error Handling
- Implement comprehensive error handling
- Use appropriate logging mechanisms
- Provide meaningful error messages
- Handle edge cases gracefully

## Troubleshooting
- Check console for error messages
- Verify dependencies are installed correctly
- Ensure environment variables are configured
- Review documentation for common issues"""

COPILOT_INSTRUCTIONS_DEFAULT = (
    "# GitHub Copilot (VS Code) Custom Instructions\n\n" + _PROJECT_GUIDELINES_BODY
)

COPILOT_WORKSPACE_DEFAULT = """---
applyTo: "**"
description: "Project-specific coding instructions"
---

# Workspace Instructions

""" + _WORKFLOW_GUIDELINES_BODY

CURSOR_RULES_DEFAULT = """---
description: "Project-specific AI coding rules"
globs:
alwaysApply: true
---

# Project Rules

""" + _PROJECT_GUIDELINES_BODY

CURSOR_CODE_GENERATION_DEFAULT = """---
description: "Code generation and modification guidelines"
globs: "**/*.{js,ts,jsx,tsx,py,java,cpp,go,rs}"
alwaysApply: false
---

# Code Generation Guidelines

""" + _WORKFLOW_GUIDELINES_BODY

WINDSURF_CONFIGURATION_DEFAULT = """# Windsurf Rules

- Read the whole project structure before proposing multi-file changes
- Keep generated code consistent with the existing conventions of the repository
- Explain the intent of each change so collaborators can review it
- Prefer small, incremental edits that keep the project building
- Use the latest stable versions of the specified technologies"""

V0_COMPONENT_GUIDELINES_DEFAULT = """# v0 Component Conventions

- Build accessible, responsive React components with clear props
- Use Next.js App Router conventions and server components where appropriate
- Style with Tailwind CSS utility classes and keep components composable
- Keep state local and lift it only when components need to share it
- Provide loading, empty and error states for data-driven components"""

CLAUDE_ADDITIONAL_CONTEXT_DEFAULT = """# Project Background

- Reason through the architecture before writing code and state the trade-offs
- Break the implementation into ordered steps and complete them one at a time
- Document public interfaces and non-obvious decisions
- Include tests for each feature and explain how to run them
- Use the latest stable versions of the specified technologies"""

CHATGPT_FOLLOW_UP_DEFAULT = """# Iteration Plan

1. Start with the project skeleton and confirm it runs
2. Implement one feature per iteration and review the result before continuing
3. Ask for clarification when a requirement is ambiguous
4. Add tests and documentation as each feature is completed
5. Summarize the remaining work at the end of every iteration"""
