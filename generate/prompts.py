# Prompt Generation Prompts
PROMPT_GENERATION_TEMPLATE = """You are an expert at creating high-quality prompts for AI coding assistants.

Create a comprehensive prompt for the following developer request, optimized for {tool_name}:

Title: {title}
AI Tool: {tool_name}
Technology Stack: {stack}
Requirements: {requirements}

{tool_instructions}

Please create a clear, actionable prompt that:
1. Clearly states the objective
2. Specifies the tech stack and tools to use
3. Outlines specific requirements and features
4. Includes any constraints or best practices
5. Is optimized for the selected AI tool
6. Uses the latest versions of mentioned technologies

{output_format}"""

# Prompt Enhancement Prompts
PROMPT_ENHANCEMENT_PROMPTS = {
    'structured': """You are an expert at improving prompts for AI coding assistants, specifically {tool_name}. Please enhance the following {part_count}-part prompt structure to make it more effective:

{previous}

Please improve all {part_count} sections by:
1. Making each section more specific and actionable
2. Adding missing technical details that would be helpful
3. Structuring each section better for AI comprehension
4. Including relevant best practices or constraints
5. Ensuring they follow prompt engineering best practices
6. Optimizing specifically for {tool_name}
7. Ensuring use of latest versions of technologies mentioned

Maintain the exact same structure with:
{section_list}

Enhance the content while keeping the format identical.""",

    'single': """You are an expert at improving prompts for AI coding assistants. Please enhance the following prompt to make it more effective for {tool_name}:

{previous}

Please improve this prompt by:
1. Making it more specific and actionable
2. Adding missing technical details that would be helpful
3. Structuring it better for AI comprehension
4. Including relevant best practices or constraints
5. Ensuring it follows prompt engineering best practices
6. Optimizing it for {tool_name}
7. Ensuring use of latest versions of technologies mentioned""",
}

PART_COUNT_WORDS = {2: "two", 3: "three", 4: "four", 5: "five"}
