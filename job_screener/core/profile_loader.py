"""
Profile Loader - Reads candidate profiles, answer banks and job postings from disk.
Job postings may be plain text, Markdown, JSON, PDF or DOCX.
"""

from pathlib import Path
from typing import Optional
import json
import logging

from .models import (
    AnswerBank,
    CandidateRequirementProfile,
    ClearanceLevel,
    ProfileSummary,
    RemotePreference,
    WorkAuthorization,
)


class ProfileLoader:
    """Loads and saves the files the screening engine works with."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_requirement_profile(self, file_path: str) -> CandidateRequirementProfile:
        """Load a candidate requirement profile from a JSON file."""
        data = self._read_object(self._require(file_path), "Profile")
        # Accept a full profile document with the fields nested under autofill data
        nested = data.get("autofill_data") or data.get("autofillData")
        if isinstance(nested, dict):
            data = nested
        return CandidateRequirementProfile.from_dict(data)

    def load_profile_summary(self, file_path: str) -> ProfileSummary:
        """Load the summary used to seed a default answer bank."""
        return ProfileSummary.from_dict(self._read_object(self._require(file_path), "Profile summary"))

    def load_answer_bank(self, file_path: str) -> AnswerBank:
        """Load an answer bank. A missing file gives an empty bank."""
        path = Path(file_path)
        if not path.exists():
            self.logger.info(f"No answer bank at {path}, starting empty")
            return AnswerBank()
        return AnswerBank.from_dict(self._read_object(path, "Answer bank"))

    def save_answer_bank(self, bank: AnswerBank, file_path: str) -> Path:
        """Write an answer bank to a JSON file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(bank.to_dict(), f, indent=2)

        self.logger.info(f"Saved answer bank: {path}")
        return path

    def read_job_posting(self, file_path: str) -> str:
        """Extract plain text from a job posting file."""
        path = self._require(file_path)
        extension = path.suffix.lower()

        if extension in [".txt", ".md", ""]:
            return path.read_text(encoding='utf-8')
        elif extension == ".json":
            data = self._read_json(path)
            return data.get("description", "") if isinstance(data, dict) else ""
        elif extension == ".pdf":
            return self._read_pdf(path)
        elif extension == ".docx":
            return self._read_docx(path)
        else:
            raise ValueError(f"Unsupported file format: {extension}")

    def _require(self, file_path: str) -> Path:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return path

    def _read_json(self, path: Path) -> dict:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _read_object(self, path: Path, name: str) -> dict:
        data = self._read_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"{name} must be a JSON object: {path}")
        return data

    def _read_pdf(self, path: Path) -> str:
        """Extract text from a PDF posting. Requires pdfplumber."""
        try:
            import pdfplumber
        except ImportError:
            raise ImportError(
                "PDF parsing requires 'pdfplumber'. "
                "Install with: pip install pdfplumber"
            )

        text = ""
        with pdfplumber.open(path) as pdf:
            for page in pdf.pages:
                text += (page.extract_text() or "") + "\n"
        return text

    def _read_docx(self, path: Path) -> str:
        """Extract text from a DOCX posting. Requires python-docx."""
        try:
            from docx import Document
        except ImportError:
            raise ImportError(
                "DOCX parsing requires 'python-docx'. "
                "Install with: pip install python-docx"
            )

        doc = Document(str(path))
        return "\n".join(para.text for para in doc.paragraphs)

    def create_sample_profile(self, output_path: Optional[str] = None) -> CandidateRequirementProfile:
        """Create a sample requirement profile, optionally writing it to disk."""
        profile = CandidateRequirementProfile(
            work_authorization=WorkAuthorization.CITIZEN,
            requires_sponsorship=False,
            security_clearance=ClearanceLevel.NONE,
            can_pass_background_check=True,
            can_pass_drug_test=True,
            languages=["English"],
            city="Austin",
            state="TX",
            willing_to_relocate=False,
            remote_preference=RemotePreference.FLEXIBLE,
        )

        if output_path:
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(profile.to_dict(), f, indent=2)

        return profile
