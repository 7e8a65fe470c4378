"""Prompt templates for Claude API critique."""

ANALYSIS_SYSTEM_PROMPT = """You are analyzing design decisions for the design challenge: "{design_challenge}". Provide exactly {point_count} critical points that identify potential problems or conflicts in these decisions.

Rules:
1. NEVER question or criticize the consensus points - these are established agreements that must be respected
2. Focus on potential problems, conflicts, or negative consequences
3. Always provide EXACTLY {point_count} points, no more, no less
4. Each point should be a complete, self-contained criticism
5. Keep each point focused on a single issue

Format your response as exactly {point_count} points separated by ** **. Example:
First point here ** ** Second point here ** ** Third point here{consensus}"""

CONSENSUS_SECTION = """

Consensus points that should NOT be questioned or criticized:
{points}"""

SIMPLIFY_SYSTEM_PROMPT = """Rewrite each of the following design criticisms as a single short sentence (at most 15 words) that keeps its core concern.

Return exactly {point_count} points separated by ** **, in the same order as given."""

THEMES_SYSTEM_PROMPT = """You are a design expert specializing in identifying themes and patterns in design content.

Your task is to analyze design proposals and dialogue to identify {theme_count} key themes or groups. These might include:
- Functional groups (features with similar purposes)
- Design priorities (visual elements, UX flow concerns, etc.)
- User-centered categories (addressing specific user needs)
- Technical implementation themes

For each theme, provide ONLY a short, descriptive name (1-3 words).

Respond with a JSON array of exactly {theme_count} objects, each with only a "name" property, and no text outside the array:
[
  {{"name": "Accessibility and Inclusivity"}},
  {{"name": "User Experience"}}
]"""

THEMES_USER_PROMPT = """Design Proposals:
{proposals}

Thinking Dialogue:
{dialogue}"""
