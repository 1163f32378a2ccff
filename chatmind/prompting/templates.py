"""Canned response text used by `chatmind.prompting.response_generator`.

All strings are static. Placeholders use `str.format` field names and are filled
by the generator; nothing here reads session state.
"""

from chatmind.core.analysis_types import ExpertiseLevel, QuestionType


# =========================================================
# IDENTITY
# =========================================================

ASSISTANT_NAME = "Tobi AI"
DEVELOPER_NAME = "Aluko Oluwatobi"

DEVELOPER_INFO = (
    f"I was created by **{DEVELOPER_NAME}**, a talented software engineer with deep expertise in "
    "artificial intelligence, machine learning, and natural language processing. He designed me "
    "to be an intelligent conversational assistant that can:\n\n"
    "• Understand context and maintain meaningful conversations\n"
    "• Adapt responses to your expertise level\n"
    "• Provide technical explanations and problem-solving assistance\n"
    "• Learn from our interactions to improve future responses\n\n"
    "Oluwatobi is passionate about creating AI solutions that genuinely help people learn, solve "
    "problems, and explore new ideas. Would you like to know more about my capabilities or discuss "
    "any technical topics?"
)

APOLOGY = (
    "I apologize, but I encountered an issue processing your message. This is unusual for me! "
    "Could you try rephrasing your question? I should be able to help once I understand what "
    "you're looking for."
)


# =========================================================
# CAPABILITIES
# =========================================================

CAPABILITIES_INTRO = "I'm an advanced AI assistant with several key capabilities:\n\n"

CAPABILITIES_BY_LEVEL = {
    ExpertiseLevel.BEGINNER: (
        "🤖 **AI & Technology Explanations**: I can explain complex concepts in simple terms",
        "💻 **Programming Help**: Guidance on learning to code and best practices",
        "🔍 **Research Assistance**: Help finding and understanding information",
        "💬 **Interactive Learning**: Engaging conversations to help you learn",
    ),
    ExpertiseLevel.INTERMEDIATE: (
        "🧠 **Advanced AI Discussions**: Deep dives into machine learning, NLP, and AI architectures",
        "⚡ **Technical Problem Solving**: Help with coding challenges and system design",
        "📊 **Data Science Guidance**: Statistics, data analysis, and visualization techniques",
        "🏗️ **Software Architecture**: Best practices for building scalable applications",
    ),
    ExpertiseLevel.ADVANCED: (
        "🔬 **Research-Level Discussions**: Latest developments in AI, algorithms, and computer science",
        "🏭 **Enterprise Solutions**: Scalability, performance optimization, and system architecture",
        "🤖 **AI Model Development**: Training strategies, model selection, and deployment",
        "📈 **Technical Leadership**: Code reviews, team practices, and technology decisions",
    ),
}

CAPABILITIES_OUTRO = (
    "\n\nBased on our conversation, I've detected your expertise level as **{level}**, so I'll "
    "tailor my responses accordingly. What would you like to explore?"
)


# =========================================================
# LEVEL ADAPTATION
# =========================================================

LEVEL_REMARKS = {
    ExpertiseLevel.BEGINNER: (
        "💡 **In simple terms**: This is like having a smart tool that learns from examples to make "
        "decisions or predictions, similar to how you learn to recognize patterns."
    ),
    ExpertiseLevel.INTERMEDIATE: (
        "🔧 **Technical note**: Consider exploring the practical implementations and frameworks "
        "available for this concept."
    ),
    ExpertiseLevel.ADVANCED: (
        "⚡ **Advanced insight**: You might want to consider the algorithmic complexity, "
        "scalability implications, and latest research developments in this area."
    ),
}


# =========================================================
# EXPLANATIONS
# =========================================================

EXPLANATION_NO_SUBJECT = (
    "I'd be happy to explain that concept! Could you specify which particular aspect you'd like "
    "me to focus on? I can provide explanations ranging from basic overviews to detailed "
    "technical discussions."
)

EXPLANATION_UNKNOWN = (
    "**{topic}** is an important concept in technology. While I don't have a specific detailed "
    "explanation for this exact term, I can help you understand it better if you provide more "
    "context about what aspect interests you most."
)

RELATED_HEADER = "**Related concepts you might find interesting:**"

EXPLANATION_FOLLOW_UP = (
    "Would you like me to dive deeper into any specific aspect or explore how this relates to "
    "other concepts?"
)


# =========================================================
# HELP / PROBLEM SOLVING
# =========================================================

HELP_WITH_TOPIC = (
    "I'd be happy to help you with **{topic}**! To provide the most useful assistance, could you "
    "tell me:\n\n"
    "• What specific aspect are you working on?\n"
    "• What's your current experience level with this topic?\n"
    "• Are you facing a particular challenge or error?\n\n"
    "The more context you provide, the better I can tailor my help to your needs!"
)

HELP_GENERIC = (
    "I'm here to help! I can assist with:\n\n"
    "🔧 **Technical Problems**: Debugging code, explaining errors, optimization\n"
    "📚 **Learning**: Explaining concepts, providing examples, study guidance\n"
    "💡 **Project Ideas**: Suggestions, best practices, architecture advice\n"
    "🚀 **Career Guidance**: Technology choices, skill development paths\n\n"
    "What specific area would you like help with?"
)

PROBLEM_SOLVING = (
    "I'm here to help you solve that problem{topic_clause}! To provide the most effective "
    "assistance, let me understand:\n\n"
    "🔍 **The Problem:**\n"
    "• What exactly is happening?\n"
    "• What were you trying to achieve?\n"
    "• Any error messages or unexpected behavior?\n\n"
    "🛠️ **Context:**\n"
    "• What technology/language are you using?\n"
    "• What have you already tried?\n"
    "• When did this issue start occurring?\n\n"
    "💡 **My Approach:**\n"
    "I'll help you debug systematically, explain what's happening, and guide you to a solution "
    "while ensuring you understand the underlying concepts.\n\n"
    "Share the details, and let's solve this together!"
)


# =========================================================
# COMPARISONS
# =========================================================

COMPARISON_TABLE = (
    "Here's a comparison between **{name_a}** and **{name_b}**:\n\n"
    "**{name_a}:**\n{points_a}\n\n"
    "**{name_b}:**\n{points_b}\n\n"
    "The best choice depends on your specific needs, project requirements, and personal "
    "preferences. Would you like me to elaborate on any particular aspect?"
)

COMPARISON_CRITERIA = (
    "That's an interesting comparison between **{a}** and **{b}**! While I don't have a "
    "pre-built comparison for these specific items, I can help you evaluate them based on:\n\n"
    "• **Purpose and Use Cases**\n"
    "• **Learning Curve and Complexity**\n"
    "• **Performance Characteristics**\n"
    "• **Community and Ecosystem**\n"
    "• **Long-term Viability**\n\n"
    "Could you tell me more about your specific context or what criteria are most important to you?"
)

COMPARISON_NO_SUBJECTS = (
    "I'd be happy to help you compare different options! To provide a meaningful comparison, "
    "could you specify:\n\n"
    "• What exactly you'd like to compare\n"
    "• What criteria are important to you (performance, ease of use, cost, etc.)\n"
    "• Your specific use case or context\n\n"
    "For example, I can compare programming languages, frameworks, tools, or concepts."
)


# =========================================================
# LEARNING
# =========================================================

LEARNING_INTRO = (
    "Great choice wanting to learn about **{topic}**! Based on your current level ({level}), "
    "here's a personalized learning approach:\n\n"
)

LEARNING_PATH_GENERIC = (
    "**Learning {topic}:**\n"
    "I'll help you create a personalized learning path based on your goals and current knowledge."
)

LEARNING_TIPS = (
    "\n\n**Learning Tips:**\n"
    "• Start with hands-on projects\n"
    "• Practice regularly, even if just 15-30 minutes daily\n"
    "• Join communities and ask questions\n"
    "• Build real projects to apply what you learn\n\n"
    "Would you like me to suggest specific resources, projects, or explain any particular concept "
    "to get you started?"
)


# =========================================================
# INFORMATION / TECHNICAL / QUESTIONS
# =========================================================

INFORMATION_FOLLOW_UP = "Is there a specific aspect of this topic you'd like me to explore further?"

INFORMATION_CATALOG = (
    "I'd be happy to provide information! I have extensive knowledge about:\n\n"
    "🤖 **AI & Machine Learning**: Concepts, algorithms, applications\n"
    "💻 **Programming**: Languages, frameworks, best practices\n"
    "🌐 **Web Development**: Frontend, backend, full-stack\n"
    "📊 **Data Science**: Analysis, visualization, statistics\n"
    "🏗️ **Software Engineering**: Architecture, design patterns, methodologies\n\n"
    "What specific information are you looking for?"
)

TECHNICAL_RELATED = "Related topics you might find interesting:\n• {topic}"

TECHNICAL_FOLLOW_UP = "Would you like me to elaborate on any specific aspect or explore related concepts?"

TECHNICAL_FALLBACK = (
    "That's an interesting technical question! While I don't have specific information about "
    "that exact topic in my knowledge base, I'd be happy to help you explore it further. Based on "
    "the keywords you mentioned ({keywords}), this seems related to {category}. Could you provide "
    "more context so I can give you a more targeted and helpful response?"
)

# Ordered; the first category with a matching keyword wins.
KEYWORD_CATEGORIES = (
    ("artificial intelligence and machine learning",
     ("ai", "artificial", "intelligence", "machine", "learning", "neural", "deep")),
    ("software development and programming",
     ("code", "programming", "development", "software", "algorithm")),
    ("web development",
     ("web", "html", "css", "javascript", "react", "frontend", "backend")),
    ("data science and analytics",
     ("data", "database", "sql", "analytics", "statistics")),
)

DEFAULT_CATEGORY = "technology and computer science"

QUESTION_LEAD_INS = {
    QuestionType.HOW: "Here's how it works:",
    QuestionType.WHAT: "Let me explain:",
    QuestionType.WHY: "The reason is:",
}

QUESTION_FOLLOW_UP = (
    "Does this answer your question, or would you like me to explain any part in more detail?"
)

QUESTION_PROMPTS = {
    QuestionType.WHAT: (
        "I'd be happy to explain that concept! However, I need a bit more context to give you the "
        "most accurate and helpful answer. Could you specify which aspect you're most interested in?"
    ),
    QuestionType.HOW: (
        "Great question! I can walk you through the process step by step. To give you the most "
        "relevant explanation, could you tell me a bit more about your current level of experience "
        "with this topic?"
    ),
    QuestionType.WHY: (
        "That's an excellent question that gets to the heart of the matter! The reasoning involves "
        "several factors. Could you help me understand what specific aspect you're most curious about?"
    ),
}


# =========================================================
# GENERAL CONVERSATION
# =========================================================

CONTINUATION = (
    "I see you're continuing our discussion about **{topic}**. That's great! Building on what "
    "we've talked about, I can help you explore this further. What specific aspect would you like "
    "to dive into?"
)

KEYWORD_ECHO = (
    "I notice you mentioned **{keyword}** - that's a fascinating topic! I'd love to help you "
    "explore this. Could you tell me more about what specifically interests you? I can provide "
    "explanations, examples, practical applications, or dive into technical details."
)

GENERIC_CAPABILITIES = (
    "I want to give you the most helpful and accurate response possible. Could you provide a bit "
    "more detail about what you're looking for? I'm particularly knowledgeable about:\n\n"
    "• AI and Machine Learning\n"
    "• Software Development\n"
    "• Programming Languages\n"
    "• Data Science\n"
    "• Web Development\n"
    "• Computer Science Concepts\n\n"
    "What would you like to explore?"
)
