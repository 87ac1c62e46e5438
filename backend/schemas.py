from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# -----------------------------
# Requests
# -----------------------------
class TitleRequest(BaseModel):
    title: Optional[str] = None


class KeywordRequest(BaseModel):
    keyword: Optional[str] = None


class CategoryRequest(BaseModel):
    categoryId: Optional[str] = None


# -----------------------------
# Title scoring
# -----------------------------
class ScoreBreakdown(BaseModel):
    length: int = Field(..., ge=0, le=100)
    keywords: int = Field(..., ge=0, le=100)
    engagement: int = Field(..., ge=0, le=100)
    clarity: int = Field(..., ge=0, le=100)
    trending: int = Field(..., ge=0, le=100)

    def as_list(self) -> List[int]:
        return [self.length, self.keywords, self.engagement, self.clarity, self.trending]


class TitleScore(BaseModel):
    overall: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    improvements: List[str]
    strengths: List[str]


class TitleScoreResponse(TitleScore):
    fallbackUsed: Optional[bool] = None
    message: Optional[str] = None


# -----------------------------
# Title analysis / rewriting / content
# -----------------------------
class TitleAnalysis(BaseModel):
    relatedTitles: List[str] = Field(default_factory=list)
    hashtags: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class TitleRewrite(BaseModel):
    success: bool = True
    rewrittenTitles: List[str]
    originalTitle: str
    fallbackUsed: bool = False
    message: Optional[str] = None


class GeneratedContent(BaseModel):
    titles: List[str]
    description: str


class GeneratedContentResponse(GeneratedContent):
    fallbackUsed: Optional[bool] = None
    message: Optional[str] = None


# -----------------------------
# Trending / keywords
# -----------------------------
class TrendingSearch(BaseModel):
    keyword: str
    searchVolume: int = Field(..., ge=0)
    category: str = ""


class TrendingResponse(BaseModel):
    trending: List[TrendingSearch] = Field(default_factory=list)


class IndiaTrendingResponse(TrendingResponse):
    hashtags: List[str] = Field(default_factory=list)


class KeywordAnalysis(BaseModel):
    keyword: str
    searchVolume: int = Field(..., ge=0)
    competitionScore: int = Field(..., ge=0, le=100)
    trendDirection: Literal["up", "down", "stable"]
    videoCount: int = Field(..., ge=0)
    avgViews: int = Field(..., ge=0)


class KeywordResearchResponse(BaseModel):
    keywords: List[KeywordAnalysis] = Field(default_factory=list)


class Category(BaseModel):
    id: str
    name: str
    categoryId: str
