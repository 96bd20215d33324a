import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def sample_csv() -> str:
    """One valid question of every type, as the exporting tool writes it."""
    return "\n".join([
        "//Brightspace quiz export",
        "NewQuestion,WR,,,",
        "ID,WR-1,,,",
        "Title,Essay,,,",
        'QuestionText,"<p>Discuss the causes</p><p>of the war.</p>",,,',
        "Points,10,,,",
        "InitialText,Start here,,,",
        "AnswerKey,Economic and political factors,,,",
        ",,,,",
        "NewQuestion,SA,,,",
        "Title,Capital,,,",
        "QuestionText,What is the capital of France?,,,",
        "InputBox,1,20,,",
        "Answer,100,Paris,,",
        ",,,,",
        "NewQuestion,M,,,",
        "Title,Capitals,,,",
        "QuestionText,Match the capital to its country,,,",
        "Scoring,EquallyWeighted,,,",
        "Choice,1,Ottawa,,",
        "Match,1,Canada,,",
        "Choice,2,Canberra,,",
        "Match,2,Australia,,",
        ",,,,",
        "NewQuestion,MC,,,",
        "Title,Capital MC,,,",
        "QuestionText,Pick the capital of France,,,",
        "Option,100,Paris,,Correct!",
        "Option,0,Berlin,,",
        "Feedback,Great job,,,",
        ",,,,",
        "NewQuestion,TF,,,",
        "Title,Earth,,,",
        "QuestionText,The earth is round.,,,",
        "TRUE,100,,,",
        "FALSE,0,,,",
        ",,,,",
        "NewQuestion,MS,,,",
        "Title,Primes,,,",
        "QuestionText,Select the primes,,,",
        "Scoring,RightAnswers,,,",
        "Option,1,2,,",
        "Option,1,3,,",
        "Option,-1,4,,Not prime",
        ",,,,",
        "NewQuestion,O,,,",
        "Title,Counting,,,",
        "QuestionText,Put in order,,,",
        "Scoring,AllOrNothing,,,",
        "Item,One,,,",
        "Item,Two,,,",
        "Item,Three,,,",
        "",
    ])


@pytest.fixture
def sample_csv_path(tmp_path: Path, sample_csv: str) -> Path:
    """Write the sample CSV to a temp file."""
    path = tmp_path / "quiz.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
