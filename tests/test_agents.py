"""Prompt → validated structure, with the LLM stubbed out."""

import pytest

from skillpath.agents import learning_agent, path_agent, roadmap_agent
from skillpath.errors import InvalidRequestError, MalformedResponseError

from conftest import FakeLLM, make_path, make_paths_reply, make_quiz_reply, make_roadmap_reply


class TestPathAgent:
    def test_three_paths_in_display_order(self, monkeypatch):
        fake = FakeLLM(make_paths_reply())
        monkeypatch.setattr(path_agent, "chat_json", fake)

        paths = path_agent.generate_learning_paths("Data Engineer", ["Python"])

        assert [p["type"] for p in paths] == ["easier", "recommended", "professional"]
        assert "Data Engineer" in fake.calls[0]["prompt"]
        assert "Python" in fake.calls[0]["prompt"]

    def test_no_skills_says_none_specified(self, monkeypatch):
        fake = FakeLLM(make_paths_reply())
        monkeypatch.setattr(path_agent, "chat_json", fake)
        path_agent.generate_learning_paths("Designer", [])
        assert "None specified" in fake.calls[0]["prompt"]

    @pytest.mark.parametrize("paths", [
        [make_path("recommended"), make_path("easier")],
        [make_path("recommended"), make_path("recommended"), make_path("professional")],
        [make_path("recommended"), make_path("easier"), make_path("professional"), make_path("easier")],
    ])
    def test_rejects_anything_but_one_of_each_type(self, monkeypatch, paths):
        monkeypatch.setattr(path_agent, "chat_json", FakeLLM({"paths": paths}))
        with pytest.raises(MalformedResponseError):
            path_agent.generate_learning_paths("Data Engineer", [])

    @pytest.mark.parametrize("skill_count", [3, 9])
    def test_skill_count_must_be_four_to_eight(self, monkeypatch, skill_count):
        reply = make_paths_reply()
        reply["paths"][0] = make_path("recommended", skill_count=skill_count)
        monkeypatch.setattr(path_agent, "chat_json", FakeLLM(reply))
        with pytest.raises(MalformedResponseError):
            path_agent.generate_learning_paths("Data Engineer", [])

    def test_normalises_loose_fields(self, monkeypatch):
        reply = make_paths_reply()
        reply["paths"][0]["type"] = "Recommended"
        reply["paths"][0]["skills"][0].update(priority="HIGH", estimatedHours="12.6")
        monkeypatch.setattr(path_agent, "chat_json", FakeLLM(reply))

        paths = path_agent.generate_learning_paths("Data Engineer", [])
        recommended = next(p for p in paths if p["type"] == "recommended")
        assert recommended["skills"][0]["priority"] == "high"
        assert recommended["skills"][0]["estimatedHours"] == 13

    def test_merge_skills_dedupes_case_insensitively(self):
        assert path_agent.merge_skills(["Python", "SQL"], ["python", " Docker ", ""]) == ["Python", "SQL", "Docker"]


class TestRoadmapAgent:
    def test_missing_ids_are_filled(self, monkeypatch):
        reply = make_roadmap_reply()
        del reply["topics"][1]["id"]
        reply["topics"][2]["subtopics"][0]["id"] = ""
        monkeypatch.setattr(roadmap_agent, "chat_json", FakeLLM(reply))

        roadmap = roadmap_agent.generate_skill_roadmap("SQL", "Data Engineer")

        assert roadmap["skillName"] == "SQL"
        assert roadmap["topics"][1]["id"] == "topic-2"
        assert roadmap["topics"][2]["subtopics"][0]["id"] == "subtopic-3-1"

    @pytest.mark.parametrize("topic_count", [3, 13])
    def test_topic_count_bounds(self, monkeypatch, topic_count):
        monkeypatch.setattr(roadmap_agent, "chat_json", FakeLLM(make_roadmap_reply(topic_count=topic_count)))
        with pytest.raises(MalformedResponseError):
            roadmap_agent.generate_skill_roadmap("SQL", "Data Engineer")

    def test_topic_without_subtopics_rejected(self, monkeypatch):
        reply = make_roadmap_reply()
        reply["topics"][0]["subtopics"] = []
        monkeypatch.setattr(roadmap_agent, "chat_json", FakeLLM(reply))
        with pytest.raises(MalformedResponseError):
            roadmap_agent.generate_skill_roadmap("SQL", "Data Engineer")


class TestLearningAgent:
    def test_outline_trims_to_section_count(self, monkeypatch):
        reply = {"sections": ["A", "B", "C", "D", "E", " "], "firstSectionContent": "# A"}
        monkeypatch.setattr(learning_agent, "chat_json", FakeLLM(reply))
        outline = learning_agent.generate_lesson_outline("SQL", "Joins", section_count=4)
        assert outline == {"sections": ["A", "B", "C", "D"], "firstSectionContent": "# A"}

    def test_outline_without_content_rejected(self, monkeypatch):
        monkeypatch.setattr(learning_agent, "chat_json", FakeLLM({"sections": ["A"]}))
        with pytest.raises(MalformedResponseError):
            learning_agent.generate_lesson_outline("SQL", "Joins")

    def test_quiz_keeps_at_most_requested_count(self, monkeypatch):
        monkeypatch.setattr(learning_agent, "chat_json", FakeLLM(make_quiz_reply(12)))
        assert len(learning_agent.generate_quiz("SQL", "Joins", question_count=10)) == 10

    def test_quiz_answer_index_out_of_range_rejected(self, monkeypatch):
        reply = make_quiz_reply(3)
        reply["questions"][1]["correctAnswer"] = 4
        monkeypatch.setattr(learning_agent, "chat_json", FakeLLM(reply))
        with pytest.raises(MalformedResponseError):
            learning_agent.generate_quiz("SQL", "Joins")

    def test_public_questions_hide_answers(self):
        public = learning_agent.public_questions(make_quiz_reply(2)["questions"])
        assert public[0] == {"index": 0, "question": "Question 0?", "options": ["A", "B", "C", "D"]}


class TestGradeQuiz:
    questions = make_quiz_reply(10)["questions"]
    right = [q["correctAnswer"] for q in questions]

    def _answers(self, correct_count):
        return [a if i < correct_count else (a + 1) % 4 for i, a in enumerate(self.right)]

    def test_exactly_sixty_percent_passes(self):
        result = learning_agent.grade_quiz(self.questions, self._answers(6), threshold=0.6)
        assert result["passed"] and result["score"] == 60

    def test_below_sixty_percent_fails(self):
        result = learning_agent.grade_quiz(self.questions, self._answers(5), threshold=0.6)
        assert not result["passed"]
        assert result["correct"] == 5

    def test_threshold_uses_delivered_count(self):
        questions = self.questions[:5]
        answers = self._answers(3)[:5]
        assert learning_agent.grade_quiz(questions, answers, threshold=0.6)["passed"]

    def test_unanswered_counts_as_wrong(self):
        answers = self.right[:6] + [None] * 4
        result = learning_agent.grade_quiz(self.questions, answers, threshold=0.6)
        assert result["correct"] == 6
        assert result["results"][9]["isCorrect"] is False

    def test_answer_count_must_match(self):
        with pytest.raises(InvalidRequestError):
            learning_agent.grade_quiz(self.questions, self.right[:9])

    def test_no_quiz(self):
        with pytest.raises(InvalidRequestError):
            learning_agent.grade_quiz([], [])
