"""
Static option lists offered by the interview configurator.
"""
from prepmind.models.schemas import DifficultyOption, DomainOption, FormatOption, LanguageOption

DOMAINS = [
    DomainOption(
        id="dsa",
        name="Data Structures & Algorithms",
        topics=[
            "Arrays & Strings",
            "Linked Lists",
            "Stacks & Queues",
            "Trees & Graphs",
            "Sorting & Searching",
            "Dynamic Programming",
            "Greedy Algorithms",
            "Backtracking",
            "Hash Tables",
            "Heaps & Priority Queues",
        ],
    ),
    DomainOption(
        id="python",
        name="Python Programming",
        topics=[
            "Python Basics",
            "Data Types & Collections",
            "Functions & Decorators",
            "OOP Concepts",
            "File Handling",
            "Exception Handling",
            "Modules & Packages",
            "Comprehensions",
            "Generators & Iterators",
            "Async Programming",
        ],
    ),
    DomainOption(
        id="javascript",
        name="JavaScript Development",
        topics=[
            "JavaScript Fundamentals",
            "ES6+ Features",
            "DOM Manipulation",
            "Async/Await & Promises",
            "Closures & Scope",
            "Prototypes & Inheritance",
            "Event Loop",
            "Error Handling",
            "Modules",
            "Design Patterns",
        ],
    ),
    DomainOption(
        id="web-dev",
        name="Web Development",
        topics=[
            "HTML & CSS",
            "Responsive Design",
            "React.js",
            "State Management",
            "API Integration",
            "Authentication",
            "Performance Optimization",
            "Testing",
            "Deployment",
            "Security Best Practices",
        ],
    ),
    DomainOption(
        id="system-design",
        name="System Design",
        topics=[
            "Scalability Concepts",
            "Database Design",
            "Caching Strategies",
            "Load Balancing",
            "Microservices",
            "API Design",
            "Message Queues",
            "CAP Theorem",
            "Distributed Systems",
            "Design Patterns",
        ],
    ),
    DomainOption(
        id="database",
        name="Database Management",
        topics=[
            "SQL Fundamentals",
            "Database Normalization",
            "Indexing",
            "Transactions & ACID",
            "Query Optimization",
            "NoSQL Databases",
            "Database Design",
            "Stored Procedures",
            "Joins & Subqueries",
            "Data Modeling",
        ],
    ),
]

DIFFICULTY_LEVELS = [
    DifficultyOption(id="beginner", name="Beginner", description="Basic concepts and fundamentals"),
    DifficultyOption(id="intermediate", name="Intermediate", description="Applied knowledge and problem-solving"),
    DifficultyOption(id="advanced", name="Advanced", description="Complex scenarios and optimization"),
]

INTERVIEW_FORMATS = [
    FormatOption(
        id="verbal",
        name="Verbal/Conversational",
        description="Theoretical questions with voice or text responses",
        icon="💬",
    ),
    FormatOption(
        id="coding",
        name="Coding Assessment",
        description="Hands-on coding problems with test cases",
        icon="💻",
    ),
]

SUPPORTED_LANGUAGES = [
    LanguageOption(id="javascript", name="JavaScript", extension="js"),
    LanguageOption(id="python", name="Python", extension="py"),
    LanguageOption(id="java", name="Java", extension="java"),
    LanguageOption(id="cpp", name="C++", extension="cpp"),
    LanguageOption(id="typescript", name="TypeScript", extension="ts"),
]
