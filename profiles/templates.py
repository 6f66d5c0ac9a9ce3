# Per-tool text injected into the generation request.

TOOL_INSTRUCTIONS = {
    'github-copilot': """For GitHub Copilot in VS Code, create instructions that work well with:
- Inline code suggestions and completions
- Chat-based code generation
- Context-aware suggestions
- VS Code workspace integration""",

    'cursor': """For Cursor AI, optimize for:
- Multi-file editing capabilities
- AI-assisted refactoring
- Code generation with context awareness
- Intelligent code suggestions""",

    'windsurf': """For Windsurf, focus on:
- Collaborative AI coding
- Project-wide understanding
- Advanced code generation
- Multi-language support""",

    'v0': """For v0 by Vercel, emphasize:
- React component generation
- Next.js integration
- UI/UX focused development
- Modern web development practices""",

    'claude': """For Claude (Anthropic), structure for:
- Detailed reasoning and explanation
- Step-by-step code generation
- Best practices and documentation
- Thorough analysis and planning""",

    'chatgpt': """For ChatGPT, optimize for:
- Conversational code generation
- Iterative development approach
- Clear explanations and examples
- Multi-step problem solving""",

    'general': """For general AI assistants, ensure:
- Clear, detailed instructions
- Technology-specific guidance
- Best practices inclusion
- Comprehensive context""",
}

_PROJECT_GUIDELINES_OUTLINE = """## Project Overview
Write a detailed description of the project, its purpose, and main goals. Be specific about what the application does and who it serves.

## Technology Stack
List the specific technologies, frameworks, libraries, and tools to use with version preferences. **If a version is not specified, always use the latest stable version available.** Include frontend, backend, database, and tooling choices.

## Coding Guidelines
Specify detailed coding standards, best practices, code organization, naming conventions, and documentation requirements for this specific project.

## Project Structure
Define the exact folder structure, file organization, and directory layout that should be followed throughout the project.

## Code Style Preferences
Detail formatting preferences, indentation, naming conventions for variables/functions/classes, import organization, and file structure patterns.

## Dependencies and Libraries
List preferred libraries, packages, utility functions, and third-party integrations with specific usage guidelines and configuration details.

## Testing Requirements
Specify testing frameworks, test types (unit, integration, e2e), coverage requirements, testing patterns, and mock strategies.

## Performance Considerations
List performance optimization techniques, caching strategies, bundling preferences, and efficiency guidelines specific to the tech stack.

## Security Guidelines
Detail security best practices, authentication patterns, data protection, input validation, and vulnerability prevention measures."""

_WORKFLOW_GUIDELINES_OUTLINE = """## Development Workflow
Describe the complete development process including git workflow, branch naming, commit conventions, code review process, and deployment steps.

## File Templates
Provide specific templates and boilerplate code for common file types in this project (components, services, models, tests, etc.).

## Common Patterns
List reusable code patterns, design patterns, architectural patterns, and project-specific code snippets with examples.

## Error Handling
Define comprehensive error handling strategies, logging practices, debugging approaches, and error reporting mechanisms.

## API Guidelines
If applicable, specify API design principles, endpoint patterns, request/response formats, authentication, and documentation standards.

## Database Guidelines
If applicable, specify database schema patterns, query optimization, migration strategies, and data modeling approaches.

## Deployment Guidelines
Describe deployment processes, environment configurations, CI/CD setup, and release procedures.

## Troubleshooting
List common issues, their root causes, step-by-step solutions, and debugging techniques specific to this project."""

_STRICT_FOOTER = (
    "CRITICAL: Replace ALL descriptive text with actual, detailed, project-specific content. "
    "Do not include any placeholder text like [brackets] or generic descriptions."
)

OUTPUT_FORMATS = {
    'github-copilot': f"""Generate the output in this EXACT format for GitHub Copilot (VS Code). You MUST replace ALL placeholder text with actual content:

## Main Prompt
Create a comprehensive main prompt that includes the project overview, requirements, and technology stack details.

## Custom Instructions (.github/copilot-instructions.md)
```markdown
# GitHub Copilot (VS Code) Custom Instructions

{_PROJECT_GUIDELINES_OUTLINE}
```

## Workspace Instructions (.github/instructions/project.instructions.md)
```markdown
---
applyTo: "**"
description: "Project-specific coding instructions"
---

# Workspace Instructions

{_WORKFLOW_GUIDELINES_OUTLINE}
```

{_STRICT_FOOTER}""",

    'cursor': f"""Generate the output in this EXACT format for Cursor AI. You MUST replace ALL placeholder text with actual content:

## Main Prompt
Create a comprehensive main prompt that includes the project overview, requirements, and technology stack details.

## Cursor Rules (.cursor/rules/project-rules.mdc)
```markdown
---
description: "Project-specific AI coding rules"
globs:
alwaysApply: true
---

# Project Rules

{_PROJECT_GUIDELINES_OUTLINE}
```

## Code Generation Rules (.cursor/rules/code-generation.mdc)
```markdown
---
description: "Code generation and modification guidelines"
globs: "**/*.{{js,ts,jsx,tsx,py,java,cpp,go,rs}}"
alwaysApply: false
---

# Code Generation Guidelines

{_WORKFLOW_GUIDELINES_OUTLINE}
```

{_STRICT_FOOTER}""",

    'windsurf': """Generate the output optimized for Windsurf:

## Main Prompt
[Primary prompt for Windsurf]

## Windsurf-Specific Configuration
[Instructions tailored for Windsurf's collaborative features]""",

    'v0': """Generate the output optimized for v0 by Vercel:

## Main Prompt
[Primary prompt for v0 component generation]

## Component Guidelines
[Specific guidelines for React component generation with v0]""",

    'claude': """Generate the output optimized for Claude:

## Main Prompt
[Detailed, structured prompt for Claude]

## Additional Context
[Comprehensive background and reasoning]""",

    'chatgpt': """Generate the output optimized for ChatGPT:

## Main Prompt
[Conversational prompt for ChatGPT]

## Follow-up Instructions
[Guidelines for iterative development]""",

    'general': """Generate a comprehensive prompt suitable for various AI tools:

## Main Prompt
[Universal prompt that works across different AI assistants]""",
}
