from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional, List, Union

from .models import Difficulty, QuestionType, QuestionDifficulty


# =========================
# AUTHORED RECORDS (content.py / examples.py / quiz.py)
# =========================
# Topic and lesson records are the contract of a content module, so
# unknown keys are rejected. Child records ignore keys they don't know.

class TopicRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    estimated_time: Optional[int] = Field(default=None, ge=0)
    order_index: Optional[int] = Field(default=None, ge=0)
    icon: Optional[str] = None


class LessonRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: Optional[str] = None
    difficulty_level: Optional[Difficulty] = None
    estimated_time: Optional[int] = Field(default=None, ge=0)
    order_index: Optional[int] = Field(default=None, ge=0)
    key_points: List[str] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)


class CodeExampleRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    language: str = Field(min_length=1)
    code: str
    description: Optional[str] = None
    explanation: Optional[str] = None
    order_index: Optional[int] = Field(default=None, ge=0)
    is_interactive: bool = False


class QuizQuestionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    question_text: str = Field(min_length=1)
    question_type: QuestionType = QuestionType.multiple_choice
    # list, mapping, or an already-serialized string
    options: Union[str, List[Any], dict, None] = None
    correct_answer: str
    explanation: Optional[str] = None
    difficulty: QuestionDifficulty = QuestionDifficulty.medium
    points: int = Field(default=10, ge=0)
    order_index: Optional[int] = Field(default=None, ge=0)

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _scalar_answer(cls, v):
        # option indices and true/false answers are stored as their text form
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v


# =========================
# CATALOG READ SCHEMAS
# =========================
class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    order_index: int
    topic_count: int = 0


class LessonSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: str
    summary: Optional[str] = None
    difficulty_level: Difficulty
    estimated_time: Optional[int] = None
    order_index: int


class TopicRead(BaseModel):
    id: int
    slug: str
    name: str
    description: Optional[str] = None
    difficulty_level: Difficulty
    estimated_time: Optional[int] = None
    order_index: int
    icon: Optional[str] = None
    category_slug: str
    lessons: List[LessonSummaryRead] = []


class CodeExampleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    language: str
    code: str
    explanation: Optional[str] = None
    order_index: int
    is_interactive: bool = False


class QuizQuestionRead(BaseModel):
    id: int
    question_text: str
    question_type: QuestionType
    options: Union[List[Any], dict, str, None] = None
    correct_answer: str
    explanation: Optional[str] = None
    difficulty: QuestionDifficulty
    points: int
    order_index: int


class LessonRead(LessonSummaryRead):
    content: str
    key_points: List[str] = []
    prerequisites: List[str] = []
    topic_slug: str
    code_examples: List[CodeExampleRead] = []
    quiz_questions: List[QuizQuestionRead] = []


class LessonSearchHit(BaseModel):
    id: int
    slug: str
    title: str
    summary: Optional[str] = None
    difficulty_level: Difficulty
    topic_slug: str
    topic_name: str
    category_slug: str
    rank: Optional[float] = None


class TopicStatus(BaseModel):
    category_slug: str
    topic_slug: str
    topic_name: str
    lesson_count: int


class ContentStatus(BaseModel):
    topics: List[TopicStatus] = []
    total_lessons: int = 0
    empty_topics: List[str] = []
