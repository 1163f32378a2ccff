"""Static in-memory knowledge catalog.

Architectural role:
    Supplies explanatory text to `chatmind.prompting.response_generator`. Nothing
    here performs I/O or mutates state after import; every query returns fresh
    lists over the same immutable entries.

Content:
    - `KNOWLEDGE_ENTRIES`: topic id -> explanatory paragraph, keyword list,
      category and difficulty tier.
    - `CONCEPT_GRAPH`: concept -> related concepts, used for "related" suggestions.
    - `TOPIC_EXPLANATIONS`: longer markdown explanations for a few core topics.
    - `COMPARISON_TABLES`: canned side-by-side comparisons keyed by subject pair.
    - `LEARNING_PATHS`: (track, level) -> numbered study plan.

Matching:
    - `search`: case-insensitive substring against topic id, content or keywords.
    - `by_keywords`: bidirectional substring containment between a query keyword
      and an entry keyword. Empty query keywords are ignored.
    Result order always follows catalog order.
"""

from dataclasses import dataclass
from typing import Iterable

from chatmind.core.analysis_types import ExpertiseLevel


@dataclass(frozen=True)
class KnowledgeEntry:
    topic: str
    keywords: tuple[str, ...]
    content: str
    category: str
    difficulty: ExpertiseLevel

    @property
    def title(self) -> str:
        return self.topic.replace("_", " ")


# =========================================================
# CATALOG
# =========================================================

KNOWLEDGE_ENTRIES: tuple[KnowledgeEntry, ...] = (
    # AI & machine learning
    KnowledgeEntry(
        topic="artificial_intelligence",
        keywords=("ai", "artificial intelligence", "machine intelligence", "cognitive computing"),
        content=(
            "Artificial Intelligence (AI) is a branch of computer science that aims to create "
            "intelligent machines capable of performing tasks that typically require human "
            "intelligence. These tasks include learning, reasoning, problem-solving, perception, "
            "language understanding, and decision-making. AI systems can be categorized into narrow "
            "AI (designed for specific tasks) and general AI (hypothetical systems with human-level "
            "intelligence across all domains)."
        ),
        category="ai",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    KnowledgeEntry(
        topic="machine_learning",
        keywords=("machine learning", "ml", "supervised learning", "unsupervised learning", "reinforcement learning"),
        content=(
            "Machine Learning is a subset of AI that enables computers to learn and improve from "
            "experience without being explicitly programmed. It uses algorithms to analyze data, "
            "identify patterns, and make predictions or decisions. The main types include: "
            "Supervised Learning (learning from labeled data), Unsupervised Learning (finding "
            "patterns in unlabeled data), and Reinforcement Learning (learning through interaction "
            "and feedback)."
        ),
        category="ai",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    KnowledgeEntry(
        topic="deep_learning",
        keywords=("deep learning", "neural networks", "deep neural networks", "artificial neural networks"),
        content=(
            "Deep Learning is a subset of machine learning that uses artificial neural networks "
            "with multiple layers (hence 'deep') to model and understand complex patterns in data. "
            "It's inspired by the structure and function of the human brain. Deep learning has "
            "revolutionized fields like computer vision, natural language processing, and speech "
            "recognition, powering technologies like image recognition, language translation, and "
            "autonomous vehicles."
        ),
        category="ai",
        difficulty=ExpertiseLevel.ADVANCED,
    ),
    KnowledgeEntry(
        topic="natural_language_processing",
        keywords=("nlp", "natural language processing", "text analysis", "language understanding", "computational linguistics"),
        content=(
            "Natural Language Processing (NLP) is a field of AI that focuses on the interaction "
            "between computers and human language. It combines computational linguistics, machine "
            "learning, and deep learning to help computers process, understand, and generate human "
            "language. NLP applications include chatbots, language translation, sentiment analysis, "
            "text summarization, and voice assistants."
        ),
        category="ai",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    KnowledgeEntry(
        topic="computer_vision",
        keywords=("computer vision", "image recognition", "object detection", "image processing", "visual perception"),
        content=(
            "Computer Vision is a field of AI that enables computers to interpret and understand "
            "visual information from the world. It involves developing algorithms and techniques to "
            "extract meaningful information from digital images and videos. Applications include "
            "facial recognition, medical image analysis, autonomous vehicles, augmented reality, and "
            "quality control in manufacturing."
        ),
        category="ai",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    # Programming languages
    KnowledgeEntry(
        topic="python",
        keywords=("python", "python programming", "django", "flask", "pandas", "numpy"),
        content=(
            "Python is a high-level, interpreted programming language known for its simplicity and "
            "readability. It's widely used in web development, data science, artificial "
            "intelligence, automation, and scientific computing. Python's extensive library "
            "ecosystem includes frameworks like Django and Flask for web development, and libraries "
            "like NumPy, Pandas, and Scikit-learn for data science and machine learning."
        ),
        category="programming",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    KnowledgeEntry(
        topic="javascript",
        keywords=("javascript", "js", "node.js", "react", "vue", "angular", "typescript"),
        content=(
            "JavaScript is a versatile, high-level programming language primarily used for web "
            "development. It enables interactive web pages and is essential for front-end "
            "development. With Node.js, JavaScript can also be used for server-side development. "
            "Popular frameworks and libraries include React, Vue.js, Angular for front-end, and "
            "Express.js for back-end development. TypeScript extends JavaScript by adding static "
            "type definitions."
        ),
        category="programming",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    KnowledgeEntry(
        topic="java",
        keywords=("java", "spring", "spring boot", "jvm", "object oriented"),
        content=(
            "Java is a class-based, object-oriented programming language designed to have as few "
            "implementation dependencies as possible. It's known for its 'write once, run anywhere' "
            "philosophy, meaning compiled Java code can run on all platforms that support Java. It's "
            "widely used in enterprise applications, Android development, and large-scale systems. "
            "The Spring framework is popular for building enterprise Java applications."
        ),
        category="programming",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    # Web development
    KnowledgeEntry(
        topic="react",
        keywords=("react", "reactjs", "jsx", "hooks", "components", "virtual dom"),
        content=(
            "React is a JavaScript library for building user interfaces, particularly web "
            "applications. Developed by Facebook, it uses a component-based architecture and "
            "introduces concepts like JSX (JavaScript XML), virtual DOM for efficient rendering, and "
            "hooks for state management. React's declarative approach makes it easier to build "
            "interactive UIs by describing what the UI should look like for any given state."
        ),
        category="web_development",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    KnowledgeEntry(
        topic="html_css",
        keywords=("html", "css", "html5", "css3", "responsive design", "flexbox", "grid"),
        content=(
            "HTML (HyperText Markup Language) is the standard markup language for creating web "
            "pages, providing the structure and content. CSS (Cascading Style Sheets) is used for "
            "styling and layout. Modern CSS includes powerful features like Flexbox and Grid for "
            "responsive layouts, animations, and advanced styling capabilities. Together, they form "
            "the foundation of web development."
        ),
        category="web_development",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    # Data science
    KnowledgeEntry(
        topic="data_science",
        keywords=("data science", "data analysis", "statistics", "data mining", "big data"),
        content=(
            "Data Science is an interdisciplinary field that uses scientific methods, processes, "
            "algorithms, and systems to extract knowledge and insights from structured and "
            "unstructured data. It combines statistics, mathematics, programming, and domain "
            "expertise to analyze and interpret complex data. Data scientists use tools like "
            "Python, R, SQL, and various machine learning algorithms to solve real-world problems."
        ),
        category="data_science",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    KnowledgeEntry(
        topic="sql",
        keywords=("sql", "database", "mysql", "postgresql", "queries", "relational database"),
        content=(
            "SQL (Structured Query Language) is a programming language designed for managing and "
            "manipulating relational databases. It allows you to create, read, update, and delete "
            "data in databases. SQL is essential for data analysis, backend development, and "
            "database administration. Popular database systems include MySQL, PostgreSQL, SQLite, "
            "and Microsoft SQL Server."
        ),
        category="data_science",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    # Software development
    KnowledgeEntry(
        topic="git",
        keywords=("git", "version control", "github", "gitlab", "repository", "commit"),
        content=(
            "Git is a distributed version control system that tracks changes in source code during "
            "software development. It allows multiple developers to work on the same project "
            "simultaneously, maintains a complete history of changes, and enables branching and "
            "merging. GitHub and GitLab are popular platforms that host Git repositories and provide "
            "additional collaboration features."
        ),
        category="software_development",
        difficulty=ExpertiseLevel.BEGINNER,
    ),
    KnowledgeEntry(
        topic="apis",
        keywords=("api", "rest", "restful", "graphql", "microservices", "web services"),
        content=(
            "APIs (Application Programming Interfaces) are sets of protocols and tools for building "
            "software applications. They define how different software components should interact. "
            "REST (Representational State Transfer) is a popular architectural style for designing "
            "networked applications. GraphQL is a query language and runtime for APIs that provides "
            "a more efficient alternative to REST in many cases."
        ),
        category="software_development",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    # Cloud
    KnowledgeEntry(
        topic="cloud_computing",
        keywords=("cloud", "aws", "azure", "google cloud", "saas", "paas", "iaas"),
        content=(
            "Cloud Computing is the delivery of computing services including servers, storage, "
            "databases, networking, software, analytics, and intelligence over the Internet. Major "
            "cloud providers include Amazon Web Services (AWS), Microsoft Azure, and Google Cloud "
            "Platform. Cloud services are typically categorized as Infrastructure as a Service "
            "(IaaS), Platform as a Service (PaaS), and Software as a Service (SaaS)."
        ),
        category="cloud",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
    # Security
    KnowledgeEntry(
        topic="cybersecurity",
        keywords=("cybersecurity", "security", "encryption", "authentication", "firewall", "malware"),
        content=(
            "Cybersecurity involves protecting digital systems, networks, and data from digital "
            "attacks, unauthorized access, and damage. It includes practices like encryption, "
            "authentication, access control, network security, and incident response. Common threats "
            "include malware, phishing, ransomware, and data breaches. Security measures include "
            "firewalls, antivirus software, secure coding practices, and regular security audits."
        ),
        category="security",
        difficulty=ExpertiseLevel.INTERMEDIATE,
    ),
)


# =========================================================
# CONCEPT GRAPH
# =========================================================

CONCEPT_GRAPH: dict[str, tuple[str, ...]] = {
    "artificial intelligence": (
        "machine learning", "deep learning", "neural networks",
        "natural language processing", "computer vision",
    ),
    "machine learning": (
        "supervised learning", "unsupervised learning", "reinforcement learning",
        "algorithms", "data science",
    ),
    "programming": ("javascript", "python", "react", "nodejs", "algorithms", "data structures"),
    "web development": ("html", "css", "javascript", "react", "nodejs", "api", "database"),
    "data science": ("statistics", "machine learning", "python", "visualization", "analytics"),
    "javascript": ("react", "nodejs", "typescript", "web development", "frontend"),
    "python": ("machine learning", "data science", "django", "flask", "automation"),
    "react": ("javascript", "frontend", "components", "hooks", "jsx"),
    "neural networks": ("deep learning", "artificial intelligence", "backpropagation", "layers"),
    "algorithms": ("data structures", "complexity", "sorting", "searching", "optimization"),
}

# Short forms resolved before graph, explanation and learning-path lookups.
TOPIC_ALIASES = {
    "ai": "artificial intelligence",
    "ml": "machine learning",
    "js": "javascript",
    "algorithm": "algorithms",
    "coding": "programming",
}


# =========================================================
# DETAILED EXPLANATIONS
# =========================================================

TOPIC_EXPLANATIONS: dict[str, str] = {
    "artificial intelligence": (
        "**Artificial Intelligence (AI)** is the simulation of human intelligence in machines that "
        "are programmed to think and learn like humans. AI systems can perform tasks that typically "
        "require human intelligence, such as visual perception, speech recognition, decision-making, "
        "and language translation.\n\n"
        "AI works through various approaches:\n"
        "• **Machine Learning**: Systems that improve through experience\n"
        "• **Deep Learning**: Neural networks with multiple layers\n"
        "• **Natural Language Processing**: Understanding and generating human language\n"
        "• **Computer Vision**: Interpreting and analyzing visual information"
    ),
    "machine learning": (
        "**Machine Learning (ML)** is a subset of AI that enables computers to learn and improve "
        "from experience without being explicitly programmed. Instead of following pre-programmed "
        "instructions, ML algorithms build mathematical models based on training data to make "
        "predictions or decisions.\n\n"
        "**Types of Machine Learning:**\n"
        "• **Supervised Learning**: Learning from labeled examples\n"
        "• **Unsupervised Learning**: Finding patterns in unlabeled data\n"
        "• **Reinforcement Learning**: Learning through trial and error with rewards"
    ),
    "javascript": (
        "**JavaScript** is a versatile, high-level programming language that's essential for modern "
        "web development. Originally created for web browsers, it now runs everywhere, from servers "
        "to mobile apps to desktop applications.\n\n"
        "**Key Features:**\n"
        "• **Dynamic and Flexible**: Variables can hold any type of data\n"
        "• **Event-Driven**: Responds to user interactions\n"
        "• **Asynchronous**: Can handle multiple operations simultaneously\n"
        "• **Ecosystem**: Vast library of frameworks and tools (React, Node.js, etc.)"
    ),
    "react": (
        "**React** is a powerful JavaScript library for building user interfaces, particularly web "
        "applications. Created by Facebook, it revolutionized frontend development with its "
        "component-based architecture.\n\n"
        "**Core Concepts:**\n"
        "• **Components**: Reusable pieces of UI\n"
        "• **JSX**: JavaScript syntax extension for writing HTML-like code\n"
        "• **Virtual DOM**: Efficient rendering system\n"
        "• **Hooks**: Modern way to manage state and side effects"
    ),
    "programming": (
        "**Programming** is the process of creating instructions for computers to execute. It "
        "involves problem-solving, logical thinking, and translating human ideas into code that "
        "machines can understand.\n\n"
        "**Fundamental Concepts:**\n"
        "• **Variables**: Store and manipulate data\n"
        "• **Functions**: Reusable blocks of code\n"
        "• **Control Flow**: Decisions and loops\n"
        "• **Data Structures**: Organize and store information efficiently"
    ),
}


# =========================================================
# COMPARISONS
# =========================================================
# Keyed by lowercased subject pair; values keep display names.

COMPARISON_TABLES: dict[tuple[str, str], tuple[tuple[str, str], tuple[str, str]]] = {
    ("react", "vue"): (
        (
            "React",
            "• **Learning Curve**: Moderate, requires understanding of JSX and concepts\n"
            "• **Performance**: Excellent with Virtual DOM\n"
            "• **Ecosystem**: Massive, with extensive third-party libraries\n"
            "• **Flexibility**: Very flexible, multiple ways to solve problems",
        ),
        (
            "Vue",
            "• **Learning Curve**: Gentle, easier for beginners\n"
            "• **Performance**: Excellent, similar to React\n"
            "• **Ecosystem**: Growing rapidly, good official libraries\n"
            "• **Flexibility**: Balanced between flexibility and convention",
        ),
    ),
    ("python", "javascript"): (
        (
            "Python",
            "• **Syntax**: Clean and readable, great for beginners\n"
            "• **Use Cases**: AI/ML, data science, backend development\n"
            "• **Performance**: Slower execution, but excellent for rapid development\n"
            "• **Libraries**: Extensive scientific and ML libraries",
        ),
        (
            "JavaScript",
            "• **Syntax**: More complex, but very flexible\n"
            "• **Use Cases**: Web development, full-stack applications\n"
            "• **Performance**: Fast execution, especially with modern engines\n"
            "• **Ecosystem**: Largest package ecosystem (npm)",
        ),
    ),
}


# =========================================================
# LEARNING PATHS
# =========================================================

LEARNING_TRACKS = {
    "programming": "programming",
    "coding": "programming",
    "javascript": "programming",
    "python": "programming",
    "ai": "ai",
    "artificial intelligence": "ai",
    "machine learning": "ai",
    "ml": "ai",
    "deep learning": "ai",
}

LEARNING_PATHS: dict[tuple[str, ExpertiseLevel], str] = {
    ("programming", ExpertiseLevel.BEGINNER): (
        "**Beginner Path:**\n"
        "1. Choose a beginner-friendly language (Python or JavaScript)\n"
        "2. Learn basic concepts: variables, functions, loops\n"
        "3. Practice with simple projects\n"
        "4. Understand problem-solving approaches"
    ),
    ("programming", ExpertiseLevel.INTERMEDIATE): (
        "**Intermediate Path:**\n"
        "1. Master data structures and algorithms\n"
        "2. Learn object-oriented programming\n"
        "3. Understand databases and APIs\n"
        "4. Build full-stack projects"
    ),
    ("programming", ExpertiseLevel.ADVANCED): (
        "**Advanced Path:**\n"
        "1. Study system design and architecture\n"
        "2. Learn advanced algorithms and optimization\n"
        "3. Contribute to open-source projects\n"
        "4. Explore specialized domains (AI, security, etc.)"
    ),
    ("ai", ExpertiseLevel.BEGINNER): (
        "**AI Learning Path:**\n"
        "1. Understand basic concepts and terminology\n"
        "2. Learn Python programming\n"
        "3. Study statistics and linear algebra basics\n"
        "4. Try beginner ML tutorials"
    ),
    ("ai", ExpertiseLevel.INTERMEDIATE): (
        "**Intermediate AI Path:**\n"
        "1. Deep dive into machine learning algorithms\n"
        "2. Learn popular frameworks (TensorFlow, PyTorch)\n"
        "3. Work on real datasets\n"
        "4. Understand neural networks"
    ),
    ("ai", ExpertiseLevel.ADVANCED): (
        "**Advanced AI Path:**\n"
        "1. Study cutting-edge research papers\n"
        "2. Implement algorithms from scratch\n"
        "3. Work on novel applications\n"
        "4. Contribute to AI research"
    ),
}


def _canonical(topic: str) -> str:
    key = (topic or "").strip().lower()
    return TOPIC_ALIASES.get(key, key)


# =========================================================
# QUERY API
# =========================================================

class KnowledgeBase:
    """Read-only query facade over the static catalog."""

    def __init__(self, entries: Iterable[KnowledgeEntry] = KNOWLEDGE_ENTRIES):
        self.entries = tuple(entries)

    def search(self, query: str) -> list[KnowledgeEntry]:
        q = (query or "").strip().lower()
        if not q:
            return []

        return [
            entry for entry in self.entries
            if q in entry.topic.lower()
            or q in entry.content.lower()
            or any(q in keyword for keyword in entry.keywords)
        ]

    def by_keywords(self, keywords: Iterable[str]) -> list[KnowledgeEntry]:
        wanted = [k.strip().lower() for k in keywords if k and k.strip()]
        if not wanted:
            return []

        return [
            entry for entry in self.entries
            if any(
                w in keyword or keyword in w
                for w in wanted
                for keyword in entry.keywords
            )
        ]

    def by_category(self, category: str) -> list[KnowledgeEntry]:
        return [entry for entry in self.entries if entry.category == category]

    def get(self, topic: str) -> KnowledgeEntry | None:
        for entry in self.entries:
            if entry.topic == topic:
                return entry
        return None

    def related(self, concept: str, limit: int = 2) -> list[str]:
        return list(CONCEPT_GRAPH.get(_canonical(concept), ()))[:max(limit, 0)]

    def explanation(self, topic: str) -> str | None:
        """
        Best explanatory text for `topic`.

        Lookup order:
        1. Detailed markdown explanation for the canonical topic.
        2. Content of the first entry listing the topic as an exact keyword.
        3. Content of the first entry matched by `by_keywords`.
        """
        key = _canonical(topic)
        if not key:
            return None

        if key in TOPIC_EXPLANATIONS:
            return TOPIC_EXPLANATIONS[key]

        for entry in self.entries:
            if key in entry.keywords:
                return entry.content

        matches = self.by_keywords([key])
        if matches:
            return matches[0].content
        return None

    def comparison(self, a: str, b: str) -> tuple[str, str, str, str] | None:
        """Canned comparison as `(name_a, points_a, name_b, points_b)`, either key order."""
        first, second = _canonical(a), _canonical(b)

        table = COMPARISON_TABLES.get((first, second))
        if table is not None:
            (name_a, points_a), (name_b, points_b) = table
            return name_a, points_a, name_b, points_b

        table = COMPARISON_TABLES.get((second, first))
        if table is not None:
            (name_b, points_b), (name_a, points_a) = table
            return name_a, points_a, name_b, points_b

        return None

    def learning_path(self, topic: str, level: ExpertiseLevel) -> str | None:
        track = LEARNING_TRACKS.get(_canonical(topic))
        if track is None:
            return None
        return LEARNING_PATHS.get((track, ExpertiseLevel(level)))
