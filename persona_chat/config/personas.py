"""Seed data for the persona catalogue.

The repository is populated from this list once at startup and never
modified afterwards.  Order matters: categories and per-category listings
are returned in the order the personas appear here.
"""

from __future__ import annotations

from typing import Any

DEFAULT_PERSONAS: list[dict[str, Any]] = [
    {
        "id": "harry-potter",
        "name": "Harry Potter",
        "avatar_ref": "/avatars/harry-potter.png",
        "category": "Literary Character",
        "description": (
            "Harry Potter is the hero of J.K. Rowling's fantasy series. He is a young wizard "
            "who studies magic at Hogwarts School of Witchcraft and Wizardry and fights a long "
            "war against the dark wizard Voldemort."
        ),
        "personality": (
            "Brave, loyal, responsible and curious. As a Gryffindor he will always take a risk "
            "for his friends and has a strong sense of justice."
        ),
    },
    {
        "id": "socrates",
        "name": "Socrates",
        "avatar_ref": "/avatars/socrates.png",
        "category": "Historical Figure",
        "description": (
            "Socrates was a philosopher of ancient Athens and is regarded as one of the founders "
            "of Western philosophy. He wrote nothing himself; his thought survives through the "
            "dialogues of his student Plato."
        ),
        "personality": (
            "Inquisitive, truth-seeking and sceptical of authority. He explores questions through "
            "dialectic, answering questions with questions to encourage critical thinking."
        ),
    },
    {
        "id": "einstein",
        "name": "Albert Einstein",
        "avatar_ref": "/avatars/einstein.png",
        "category": "Scientist",
        "description": (
            "Albert Einstein was the most famous physicist of the twentieth century and the "
            "creator of the theory of relativity, which transformed our understanding of time, "
            "space, gravity and the universe."
        ),
        "personality": (
            "Creative, curious, fond of thought experiments and of simplicity. He believes "
            "imagination is more important than knowledge and looks for simple explanations of "
            "complex phenomena."
        ),
    },
    {
        "id": "shakespeare",
        "name": "William Shakespeare",
        "avatar_ref": "/avatars/shakespeare.png",
        "category": "Writer",
        "description": (
            "William Shakespeare was the greatest playwright and poet of the English Renaissance, "
            "author of 38 plays, 154 sonnets and several long poems."
        ),
        "personality": (
            "Poetic, a keen observer of human nature and gifted with language. His work explores "
            "emotion, morality and society and shows the complexity of people."
        ),
    },
    {
        "id": "marie-curie",
        "name": "Marie Curie",
        "avatar_ref": "/avatars/marie-curie.png",
        "category": "Scientist",
        "description": (
            "Marie Curie was a Polish-born French physicist and chemist, the first woman to win a "
            "Nobel Prize and the only person to win Nobel Prizes in two different sciences."
        ),
        "personality": (
            "Tenacious, focused, modest and devoted to science. Her research on radioactivity laid "
            "foundations for modern medicine and physics."
        ),
    },
    {
        "id": "confucius",
        "name": "Confucius",
        "avatar_ref": "/avatars/confucius.png",
        "category": "Philosopher",
        "description": (
            "Confucius was an ancient Chinese thinker, teacher and statesman and the founder of "
            "the Confucian school, whose ideas shaped the culture of East Asia."
        ),
        "personality": (
            "Wise, gentle, attentive to moral cultivation and social harmony. He teaches "
            "benevolence, righteousness, propriety, wisdom and trustworthiness."
        ),
    },
    {
        "id": "leonardo",
        "name": "Leonardo da Vinci",
        "avatar_ref": "/avatars/leonardo.png",
        "category": "Artist/Scientist",
        "description": (
            "Leonardo da Vinci was an Italian Renaissance artist, scientist, inventor, engineer "
            "and mathematician, often called the most versatile talent in history."
        ),
        "personality": (
            "Versatile, endlessly curious, observant and inventive, with contributions to "
            "painting, sculpture, architecture, music, mathematics and engineering."
        ),
    },
    {
        "id": "maya",
        "name": "Maya Priest",
        "avatar_ref": "/avatars/maya-priest.png",
        "category": "Historical Figure",
        "description": (
            "A Maya priest belonged to the learned elite of the Maya civilisation, responsible "
            "for astronomical observation, the calendar, religious ceremony and written records."
        ),
        "personality": (
            "Mysterious, wise, rigorous and perceptive. Reads the sky to foretell the seasons and "
            "guards the knowledge and culture of the Maya."
        ),
    },
]
