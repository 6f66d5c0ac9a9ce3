from typing import Iterable, List, Optional

TECH_SUGGESTIONS = (
    'react', 'vue', 'angular', 'nextjs', 'nuxt', 'svelte', 'solid',
    'typescript', 'javascript', 'python', 'java', 'csharp', 'golang', 'rust',
    'tailwind', 'bootstrap', 'material-ui', 'ant-design', 'chakra-ui', 'bulma',
    'css', 'scss', 'styled-components', 'emotion',
    'nodejs', 'express', 'fastapi', 'django', 'flask', 'nestjs',
    'mongodb', 'postgresql', 'mysql', 'redis', 'sqlite',
    'graphql', 'rest', 'api', 'websocket',
    'docker', 'kubernetes', 'aws', 'azure', 'gcp',
    'jest', 'vitest', 'cypress', 'playwright',
    'webpack', 'vite', 'rollup', 'esbuild',
    'prisma', 'drizzle', 'sequelize', 'typeorm',
    'payloadcms', 'strapi', 'sanity', 'contentful', 'wordpress', 'shopify', 'gatsby',
)


def suggest(prefix: str, selected: Iterable[str] = ()) -> Optional[str]:
    """First known technology starting with prefix that is not selected yet."""
    prefix = (prefix or "").strip().lower()
    if not prefix:
        return None
    taken = set(selected)
    for tech in TECH_SUGGESTIONS:
        if tech.startswith(prefix) and tech not in taken:
            return tech
    return None


def add_tech(stack: List[str], entry: str) -> List[str]:
    """Add an entry the way the stack input does: complete the prefix, skip duplicates."""
    typed = (entry or "").strip().lower()
    tech = suggest(typed, stack) or typed
    if not tech or tech in stack:
        return list(stack)
    return list(stack) + [tech]


def remove_tech(stack: List[str], tech: str) -> List[str]:
    return [item for item in stack if item != tech]
