"""Brainstorming prompts for CIM Spark"""
from langchain_core.prompts import ChatPromptTemplate

SPARK_SYSTEM_PROMPT = """You are CIM Spark, a creative brainstorming assistant for content creators.
You help generate ideas, hooks, outlines, and variations for content pieces.
Be creative, concise, and actionable. Format your responses in a clear, easy-to-read way."""

hooks_prompt_template = ChatPromptTemplate.from_messages([
    ("system", SPARK_SYSTEM_PROMPT),
    ("human", """Based on this content idea, generate 3 compelling hooks that could capture audience attention:

Title: {title}
{details}

Generate 3 different hooks (opening lines or angles) that could make this content irresistible. Each hook should be different in style - one emotional, one curiosity-driven, one value-focused."""),
])

outline_prompt_template = ChatPromptTemplate.from_messages([
    ("system", SPARK_SYSTEM_PROMPT),
    ("human", """Create a brief content outline for this idea:

Title: {title}
{details}

Generate a structured outline with:
- Hook/Opening
- 3-5 main points or sections
- Call-to-action/Conclusion

Keep it concise but actionable."""),
])

titles_prompt_template = ChatPromptTemplate.from_messages([
    ("system", SPARK_SYSTEM_PROMPT),
    ("human", """Generate 5 title variations for this content idea:

Current Title: {title}
{details}

Create 5 alternative titles with different approaches:
1. Curiosity-driven
2. Benefit-focused
3. How-to style
4. Number/List-based
5. Emotional/Story-based"""),
])
