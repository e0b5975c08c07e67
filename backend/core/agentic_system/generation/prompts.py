"""
Prompt templates for classification, code synthesis and chat.

Each prompted generation is described by a PromptSpec: a ChatPromptTemplate
plus the post-processing its output needs.

Dependencies: langchain_core.prompts
System role: Prompt definitions for the code-generation client
"""

from dataclasses import dataclass
from typing import Callable

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from backend.core.agentic_system.generation.postprocess import (
    normalize_label,
    strip_code_fences,
    strip_text,
)


@dataclass(frozen=True)
class PromptSpec:
    """One prompted generation: name for logs, template, output post-processing."""

    name: str
    template: ChatPromptTemplate
    postprocess: Callable[[str], str] = strip_text


PLOT_OUTPUT_PATH = "/tmp/plot.png"
CLEANED_OUTPUT_PATH = "/tmp/cleaned_data.csv"

CLASSIFIER_TEMPLATE = """You are an intent classifier for a data analysis assistant. Classify the following user message into one of three categories:

1. ANALYSIS: User wants to analyze data, create visualizations, generate plots, charts, graphs, or explore existing data
   Examples: "create a bar chart", "show me a histogram", "plot the sales data", "visualize the distribution"

2. PREPARATION: User wants to clean, transform, prepare, filter, or process CSV data
   Examples: "remove duplicates", "fill missing values", "filter rows where", "clean the data", "transform column"

3. GENERAL: General conversation, questions about data science, or other requests
   Examples: "what is pandas", "how do I analyze data", "hello", "thank you"

{context_section}
User message: "{message}"

Respond with ONLY ONE WORD - either ANALYSIS, PREPARATION, or GENERAL. Nothing else."""

PLOT_CODE_TEMPLATE = """You are a Python data visualization expert. Generate Python code to create a visualization.

DATA FILE URL: {data_url}
{description_section}
USER REQUEST: "{request}"

REQUIREMENTS:
1. Use pandas to load the CSV from the URL
2. Use matplotlib and/or seaborn for visualization
3. Save the plot as '""" + PLOT_OUTPUT_PATH + """' with dpi=150
4. Use plt.tight_layout() before saving
5. Handle errors gracefully
6. Print "PLOT_SAVED" when done

Generate ONLY executable Python code. No explanations, no markdown, no code blocks.
Start directly with import statements."""

CLEANING_CODE_TEMPLATE = """You are a Python data engineering expert. Generate Python code to clean/transform CSV data.

DATA FILE URL: {data_url}
{description_section}
USER REQUEST: "{request}"

REQUIREMENTS:
1. Use pandas to load the CSV from the URL
2. Perform the requested cleaning/transformation
3. Save the cleaned data to '""" + CLEANED_OUTPUT_PATH + """'
4. Print a summary of changes made
5. Print "CLEANING_COMPLETE" when done
6. Handle errors gracefully

Generate ONLY executable Python code. No explanations, no markdown, no code blocks.
Start directly with import statements."""

CHAT_SYSTEM_PROMPT = """You are Datagent, a helpful AI assistant specialized in data analysis and preparation.
You help users understand data concepts, provide guidance on data analysis techniques, and answer questions about working with data.
Be concise, friendly, and helpful. If the user hasn't uploaded data yet, remind them they can upload a CSV file to get started."""

CLASSIFIER_PROMPT = PromptSpec(
    name="intent-classifier",
    template=ChatPromptTemplate.from_messages([("human", CLASSIFIER_TEMPLATE)]),
    postprocess=normalize_label,
)

PLOT_CODE_PROMPT = PromptSpec(
    name="plot-code",
    template=ChatPromptTemplate.from_messages([("human", PLOT_CODE_TEMPLATE)]),
    postprocess=strip_code_fences,
)

CLEANING_CODE_PROMPT = PromptSpec(
    name="cleaning-code",
    template=ChatPromptTemplate.from_messages([("human", CLEANING_CODE_TEMPLATE)]),
    postprocess=strip_code_fences,
)

CHAT_PROMPT = PromptSpec(
    name="chat",
    template=ChatPromptTemplate.from_messages([
        ("system", CHAT_SYSTEM_PROMPT),
        MessagesPlaceholder("history", optional=True),
        ("human", "{message}"),
    ]),
    postprocess=strip_text,
)


def context_section(context: str) -> str:
    """Classifier block carrying recent conversation lines, empty when none."""
    if not context:
        return ""
    return f"Previous conversation context:\n{context}\n"


def description_section(description: str) -> str:
    """Code prompt line describing the data file, empty when none."""
    if not description:
        return ""
    return f"DATA DESCRIPTION: {description}\n"
