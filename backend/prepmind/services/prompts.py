import json
from typing import Dict, List

from prepmind.models.schemas import Answer, InterviewConfig, Question

QUESTION_COUNTS = {"verbal": 5, "coding": 3}


def expected_question_count(config: InterviewConfig) -> int:
    return QUESTION_COUNTS[config.format]


def build_question_prompt(config: InterviewConfig) -> str:
    """Prompt for the full question set of one interview"""
    count = expected_question_count(config)
    domain = config.custom_domain or config.domain

    if config.format == "verbal":
        guidance = (
            "- Focus on theoretical understanding, problem-solving approach, and conceptual knowledge\n"
            "- Include scenario-based and experience-based questions\n"
            "- Questions should assess deep understanding"
        )
        payload_fields = '"expectedAnswer": "brief expected answer outline"'
    else:
        guidance = (
            "- Provide clear problem statements with examples\n"
            "- Each problem is solved by a function named solution that takes a single argument\n"
            "- Include at least 2 test cases for each problem (1 visible, 1+ hidden)\n"
            "- Write test inputs as literal values and expected outputs as plain strings\n"
            "- Add constraints and edge cases\n"
            "- Problems should be practical and test coding skills"
        )
        payload_fields = """"testCases": [
      {"input": "test input", "expectedOutput": "expected output", "isHidden": false},
      {"input": "test input 2", "expectedOutput": "expected output 2", "isHidden": true}
    ],
    "constraints": ["constraint 1", "constraint 2"]"""

    focus = f"\nSpecific area: {config.specific_area}" if config.specific_area else ""

    return f"""You are an expert technical interviewer. Generate exactly {count} interview questions for the following configuration:

Domain: {domain}
Difficulty: {config.difficulty}
Topics: {", ".join(config.topics)}
Format: {config.format}{focus}

For {"verbal/conceptual" if config.format == "verbal" else "coding"} questions:
{guidance}

Return ONLY a valid JSON array of questions in this exact format:
[
  {{
    "id": "unique-id",
    "question": "the question text",
    "type": "{config.format}",
    "difficulty": "{config.difficulty}",
    "topic": "specific topic from the list",
    {payload_fields}
  }}
]"""


def build_evaluation_prompt(answer: Answer, question: Question) -> str:
    if question.type == "verbal":
        response_block = f"Candidate's Answer: {answer.answer}"
        rubric = "For verbal: Evaluate clarity, depth of understanding, communication, and completeness."
    else:
        response_block = f"Candidate's Code:\n{answer.code or ''}"
        rubric = "For code: Evaluate correctness, efficiency, readability, and best practices."

    outline = f"Expected Answer Outline: {question.expected_answer}" if question.expected_answer else ""

    return f"""You are an expert technical interviewer evaluating a candidate's answer.

Question: {question.question}
Topic: {question.topic}
Difficulty: {question.difficulty}
Type: {question.type}

{response_block}

{outline}

Evaluate the response and provide:
1. A score out of 100
2. Detailed feedback (2-3 sentences)
3. 2-3 specific strengths
4. 2-3 specific weaknesses or areas for improvement
5. 2-3 actionable suggestions

{rubric}

Return ONLY a valid JSON object in this exact format:
{{
  "score": 85,
  "feedback": "detailed feedback text",
  "strengths": ["strength 1", "strength 2"],
  "weaknesses": ["weakness 1", "weakness 2"],
  "suggestions": ["suggestion 1", "suggestion 2"]
}}"""


def interview_transcript(answers: List[Answer], questions: List[Question]) -> List[Dict]:
    """Join answers to their questions by id; unscored answers count as 0."""
    by_id = {q.id: q for q in questions}
    rows = []
    for answer in answers:
        question = by_id.get(answer.question_id)
        rows.append({
            "question": question.question if question else None,
            "topic": question.topic if question else None,
            "answer": answer.answer,
            "code": answer.code,
            "score": answer.evaluation.score if answer.evaluation else 0,
        })
    return rows


def build_overall_evaluation_prompt(answers: List[Answer], questions: List[Question]) -> str:
    interview_data = json.dumps(interview_transcript(answers, questions), indent=2)

    return f"""You are an expert technical interviewer providing final interview feedback.

Interview Data:
{interview_data}

Provide a comprehensive overall evaluation including:
1. Overall score (weighted average, out of 100)
2. Topic-wise scores (for each unique topic)
3. 3-5 key strengths across all answers
4. 3-5 key weaknesses or areas for improvement
5. 5-7 specific, actionable recommendations for skill development
6. A detailed performance summary (3-4 sentences)

Return ONLY a valid JSON object in this exact format:
{{
  "overallScore": 85,
  "topicWiseScores": {{
    "Topic Name": 90,
    "Another Topic": 80
  }},
  "strengths": ["strength 1", "strength 2", "strength 3"],
  "weaknesses": ["weakness 1", "weakness 2", "weakness 3"],
  "recommendations": ["rec 1", "rec 2", "rec 3", "rec 4", "rec 5"],
  "performanceSummary": "detailed summary text"
}}"""


def build_chat_prompt(message: str) -> str:
    return f"""You are PrepMind, an intelligent AI assistant specializing in interview preparation and career guidance.

User Query: {message}

Instructions:
- Provide helpful, detailed, and professional responses
- If asked about interview preparation, offer specific advice, tips, examples, and best practices
- If asked about technical topics, provide clear explanations with examples
- Be conversational, supportive, and encouraging
- Format your response clearly with proper paragraphs and bullet points where appropriate
- Keep responses concise but comprehensive (aim for 200-400 words unless more detail is needed)

Respond to the user's query now:"""
