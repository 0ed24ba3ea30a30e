# content/archetypes.py
"""
Données de référence du questionnaire Architypes.

12 archétypes × 3 questions = 36 questions. Ce nombre conditionne
la complétion d'une évaluation (TOTAL_QUESTIONS, engine/profile/scoring.py).

Table immuable chargée une seule fois à l'import — jamais modifiée
par le core. Source unique de seed/seed_archetypes.py (peuplement DB) ;
le service relit ensuite le référentiel depuis la DB.
"""
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ArchetypeRef:
    id:                       int
    name:                     str
    male_name:                str
    female_name:              str
    core_drive:               str
    strengths:                str
    shadow:                   str
    in_business:              str
    free_teaser:              str
    detailed_characteristics: str
    blindspots:               str
    interaction_patterns:     str


@dataclass(frozen=True)
class QuestionRef:
    id:           int
    order:        int
    archetype_id: int
    text:         str


QUESTIONS_PER_ARCHETYPE = 3


ARCHETYPES: Tuple[ArchetypeRef, ...] = (
    ArchetypeRef(
        id=1,
        name="King/Queen",
        male_name="The King",
        female_name="The Queen",
        core_drive="Order, responsibility, sovereignty",
        strengths="Leadership, decision-making, creating stability, taking ownership",
        shadow="Tyrant (controlling) or Abdicator (avoids responsibility)",
        in_business="Executive leadership, department heads, founders",
        free_teaser="You lead with sovereignty and responsibility. You create order where there is chaos and naturally take ownership of outcomes. People look to you to make final decisions and bring stability to complex situations.",
        detailed_characteristics="The King/Queen archetype embodies the essence of mature, responsible leadership. You have a natural ability to see the bigger picture and make decisions that serve the collective good. You create structure and order not for control's sake, but to provide a stable foundation for others to thrive. Your presence commands respect, and you carry the weight of responsibility with grace. You understand that true leadership is about service to your domain—whether that's your team, family, or organization.",
        blindspots="You may struggle with delegation, believing that you must oversee everything personally. Your strong sense of responsibility can lead to burnout if you don't maintain boundaries. You might also become rigid in your thinking, preferring order to the point where you resist necessary change. In shadow, you can become tyrannical, using control to manage your fear of chaos, or conversely, you might abdicate responsibility when the burden feels too heavy.",
        interaction_patterns="Works well with Warriors (who execute your vision) and Fathers/Mothers (who nurture what you've built). May clash with Rebels (who challenge your authority) and Explorers (who resist structure). Needs Sages for wise counsel and Magicians to help transform systems.",
    ),
    ArchetypeRef(
        id=2,
        name="Warrior/Huntress",
        male_name="The Warrior",
        female_name="The Huntress",
        core_drive="Discipline, courage, boundaries",
        strengths="Execution, perseverance, protecting what matters, focus",
        shadow="Sadist (aggression without purpose) or Masochist (self-destruction)",
        in_business="Operations, sales, project management, crisis response",
        free_teaser="You are disciplined, focused, and relentless in pursuit of your goals. You set firm boundaries and have the courage to face challenges head-on. Others rely on you to execute and protect what matters most.",
        detailed_characteristics="The Warrior/Huntress is the archetype of focused action and protective strength. You embody discipline, not as rigid control, but as committed practice toward mastery. Your courage isn't the absence of fear—it's the willingness to move forward despite it. You understand that true strength comes from knowing what you're willing to fight for and protecting those boundaries fiercely. You bring clarity to action, cutting through confusion with decisive movement. Your persistence inspires others to push beyond their perceived limits.",
        blindspots="Your drive can become ruthless aggression when disconnected from purpose. You may push yourself or others too hard, seeing rest as weakness. Boundaries can become walls that isolate you. In shadow, you risk becoming sadistic (hurting others without purpose) or masochistic (destroying yourself in the name of discipline). You might also struggle to recognize when strategic retreat is wiser than continued advance.",
        interaction_patterns="Natural ally to Kings/Queens (executing their vision) and Heroes (sharing the drive for achievement). May conflict with Lovers (who prioritize feeling over action) and Jesters (whose playfulness feels frivolous). Benefits from Sages who provide strategic wisdom and Caregivers who remind you to rest.",
    ),
    ArchetypeRef(
        id=3,
        name="Magician/Mystic",
        male_name="The Magician",
        female_name="The Mystic",
        core_drive="Transformation, insight, mastery",
        strengths="Pattern recognition, problem-solving, connecting disparate ideas",
        shadow="Manipulator (uses knowledge to control) or Detached Dreamer",
        in_business="Systems architecture, integration, automation, consulting",
        free_teaser="You see patterns and connections others miss. You transform complex problems into elegant solutions and are the one people turn to when something 'impossible' needs solving.",
        detailed_characteristics="The Magician/Mystic possesses the rare ability to perceive the hidden patterns underlying reality. You see connections between disparate elements that others miss, enabling you to transform problems into opportunities through insight rather than force. Your mastery comes from deep understanding of how systems work—whether technical, organizational, or human. You bring the gift of possibility, showing others that what seemed impossible is merely misunderstood. Your power lies in knowledge and the ability to apply it creatively.",
        blindspots="Your understanding can lead to manipulation when you use knowledge to control rather than liberate. You may become so focused on the theoretical that you lose touch with practical reality, becoming the detached dreamer lost in abstraction. Your ability to see multiple perspectives can lead to paralysis or to using complexity to avoid commitment. You might also become arrogant, believing your insights make you superior.",
        interaction_patterns="Partners well with Sages (sharing love of knowledge) and Creators (who bring your insights into form). May frustrate Warriors (who want action over analysis) and Kings/Queens (who need clear recommendations). Complements Explorers by giving their discoveries structure.",
    ),
    ArchetypeRef(
        id=4,
        name="Lover",
        male_name="The Lover",
        female_name="The Lover",
        core_drive="Connection, passion, aliveness",
        strengths="Deep engagement, appreciation of beauty, emotional intelligence",
        shadow="Addicted Lover (obsession) or Impotent Lover (numbness)",
        in_business="Customer experience, brand, design, culture",
        free_teaser="You engage deeply with life, beauty, and meaning. Passion flows through everything you do, and you form strong emotional connections with people and work. For you, a life without depth and feeling isn't worth living.",
        detailed_characteristics="The Lover embodies passion, connection, and full-bodied engagement with life. You experience the world through feeling and sensation, bringing intensity and depth to everything you touch. Beauty matters to you—not as superficial decoration, but as the aesthetic expression of meaning. You form deep bonds and commit fully when you care about something or someone. Your gift is the ability to be fully present, to savor life rather than merely accomplish tasks. You remind others why they're alive.",
        blindspots="Your passion can become obsession, losing yourself in what you love to the point of losing yourself. You may struggle with boundaries, getting too enmeshed in relationships or projects. In shadow, you can become addicted to intensity, chasing the high of connection without substance, or conversely, you may shut down entirely, becoming numb to protect yourself from feeling too much. Your need for meaning can make practical necessities feel empty.",
        interaction_patterns="Natural affinity with Caregivers (who share your connection focus) and Creators (who channel passion into form). May clash with Warriors (whose discipline feels cold) and Sages (whose detachment feels sterile). Benefits from Jesters who share your appreciation for life's pleasure.",
    ),
    ArchetypeRef(
        id=5,
        name="Sage",
        male_name="The Sage",
        female_name="The Sage",
        core_drive="Truth, understanding, wisdom",
        strengths="Analysis, reflection, objectivity, teaching",
        shadow="Disconnected Sage (ivory tower) or Dogmatist (closed-minded)",
        in_business="Research, strategy, compliance, training, advisory",
        free_teaser="You seek deep understanding above all else. Truth matters more to you than comfort, and you're constantly seeking knowledge and wisdom. You'd rather fully understand something than act quickly on partial information.",
        detailed_characteristics="The Sage is driven by an insatiable thirst for truth and understanding. You approach life with curiosity and discernment, seeking wisdom through study, reflection, and careful observation. Your gift is the ability to cut through illusion and see what is actually true, not merely what is believed or comfortable. You value objectivity and can step back from emotional entanglement to gain perspective. Your knowledge serves others through teaching and counsel, helping them see clearly what they couldn't perceive before.",
        blindspots="Your pursuit of truth can lead you into ivory tower detachment, accumulating knowledge without applying it. You may use the need for 'more information' to avoid action or commitment. In shadow, you can become dogmatic, believing your understanding is the only truth, or cynical, using your insights to tear down without building. Your detachment can make you seem cold or uncaring, and you might undervalue emotional or experiential knowledge.",
        interaction_patterns="Strong connection with Magicians (sharing love of understanding) and Fathers/Mothers (who teach wisdom). May frustrate Lovers (who prioritize feeling) and Explorers (who value experience over study). Serves Kings/Queens well as trusted advisors.",
    ),
    ArchetypeRef(
        id=6,
        name="Explorer/Wild Woman",
        male_name="The Explorer",
        female_name="The Wild Woman",
        core_drive="Freedom, discovery, autonomy",
        strengths="Innovation, adaptability, pioneering, independence",
        shadow="Wanderer (aimless) or Escapist (avoids commitment)",
        in_business="R&D, market expansion, entrepreneurship, field roles",
        free_teaser="You need freedom and novelty like others need air. Routine suffocates you, and you're drawn to the unknown and unexplored. You resist being tied down to any single path, always seeking the next horizon.",
        detailed_characteristics="The Explorer/Wild Woman is the archetype of freedom, discovery, and the untamed spirit. You resist domestication in all its forms, needing autonomy to feel alive. Your gift is pioneering—you go where others haven't, bringing back discoveries that expand what's possible for everyone. You adapt quickly because you're not attached to any particular way of being. Your independence isn't selfish; it's necessary for you to bring back the innovations and experiences that routine-bound society desperately needs.",
        blindspots="Your love of freedom can become aimless wandering, moving for the sake of movement without clear purpose. You may avoid commitment entirely, mistaking attachment for entrapment. In shadow, you can become an escapist, running from difficulty rather than toward discovery. Your independence might isolate you, and your resistance to structure can prevent you from building anything lasting. You may also romanticize the new while dismissing what's already been built.",
        interaction_patterns="Works well with Creators (bringing fresh perspectives) and Rebels (sharing distrust of constraint). May clash with Kings/Queens (who provide structure) and Warriors (who value discipline). Complements Magicians by testing theories in the real world.",
    ),
    ArchetypeRef(
        id=7,
        name="Creator/Creatrix",
        male_name="The Creator",
        female_name="The Creatrix",
        core_drive="Innovation, expression, bringing new things into being",
        strengths="Originality, vision, craftsmanship, artistic sensibility",
        shadow="Perfectionist (never finishes) or Tortured Artist (suffers for creation)",
        in_business="Product development, marketing, design, content, entrepreneurship",
        free_teaser="You're driven to build original things—ideas, systems, products that didn't exist before. You feel most alive when creating something new and see possibilities where others see only blank space.",
        detailed_characteristics="The Creator/Creatrix brings new realities into being through imagination and craftsmanship. You see potential where others see nothing, and you possess both the vision to conceive new possibilities and the skill to manifest them. Your creations carry your unique signature—whether you're building products, organizations, or works of art. You understand that creation is sacred work, the act of bringing something from the invisible realm of imagination into tangible form. Your gift enriches the world with beauty, utility, and meaning.",
        blindspots="Your vision can become perfectionism, where nothing is ever good enough to share with the world. You may suffer for your art unnecessarily, believing pain is required for creation. In shadow, you can become the tortured artist, so identified with your wounds that you fear healing would end your creativity. You might also create compulsively, using the act of making to avoid being present. Your high standards can make you harshly critical of others' work.",
        interaction_patterns="Natural partners with Lovers (sharing aesthetic sensibility) and Magicians (who provide creative insight). May frustrate Warriors (who want finished products) and Sages (who want practical utility). Benefits from Kings/Queens who provide structure for your visions.",
    ),
    ArchetypeRef(
        id=8,
        name="Hero",
        male_name="The Hero",
        female_name="The Hero",
        core_drive="Mastery, achievement, proving worth",
        strengths="Courage, competence, resilience, inspiring others",
        shadow="Bully (dominates) or Coward (avoids challenge)",
        in_business="Sales, competitive roles, turnaround situations, athletics",
        free_teaser="You prove yourself through achievement and overcoming challenges. Competition energizes you, and you need to know you've earned your place through demonstrated competence and courage.",
        detailed_characteristics="The Hero is driven by the need to prove their worth through achievement and mastery. You face challenges that others avoid, not from recklessness but from the conviction that you can overcome them. Your courage inspires others to find their own strength. You understand that true competence comes from testing yourself against real obstacles, not from theoretical knowledge. Your resilience shows others that setbacks are temporary, and your victories demonstrate what's possible when you refuse to quit.",
        blindspots="Your drive for achievement can become an endless need to prove yourself, never satisfied with what you've accomplished. You may become a bully, dominating others to feel superior, or conversely, a coward who avoids challenges that might reveal limitations. In shadow, you can confuse your worth with your accomplishments, losing your sense of self when you're not actively winning. You might also create unnecessary conflicts to have dragons to slay, or burn yourself out pursuing achievement for achievement's sake.",
        interaction_patterns="Strong alliance with Warriors (sharing drive for achievement) and Kings/Queens (who reward competence). May compete unnecessarily with other Heroes or dismiss Caregivers as weak. Benefits from Sages who provide perspective on what's worth achieving.",
    ),
    ArchetypeRef(
        id=9,
        name="Rebel/Outlaw",
        male_name="The Rebel",
        female_name="The Outlaw",
        core_drive="Liberation, revolution, breaking false structures",
        strengths="Challenging status quo, courage, authenticity, change agency",
        shadow="Criminal (destruction without purpose) or Self-Saboteur",
        in_business="Innovation, disruption, change management, turnaround",
        free_teaser="You question authority and resist arbitrary structures. You'd rather break rules that don't make sense than blindly follow them, and you see through systems that others accept without question.",
        detailed_characteristics="The Rebel/Outlaw possesses the rare courage to challenge systems that everyone else accepts as unchangeable. You see through social conditioning and question authority that hasn't earned respect through wisdom or justice. Your gift is liberation—you break false structures so that something more authentic can emerge. You're willing to stand alone against the crowd when you know something is wrong, and your authenticity inspires others to be true to themselves rather than conforming to expectations.",
        blindspots="Your rebellion can become destruction for its own sake, tearing down without building anything better. You may become the criminal, breaking rules without higher purpose, or the self-saboteur, destroying your own success because it feels too conventional. In shadow, you might rebel reflexively against any authority, even when it's wise and just. Your distrust of systems can leave you unable to work within any structure, and your outsider status might become your identity, preventing you from creating the change you wish to see.",
        interaction_patterns="Allies with Explorers (sharing distrust of constraint) and Creators (who build alternatives to broken systems). May clash with Kings/Queens (who represent authority) and Warriors (who enforce rules). Complements Magicians who can reimagine broken systems.",
    ),
    ArchetypeRef(
        id=10,
        name="Jester/Fool",
        male_name="The Jester",
        female_name="The Fool",
        core_drive="Joy, presence, truth through humor",
        strengths="Lightness, perspective, cutting through pretension, living in the moment",
        shadow="Cruel Joker (humor as weapon) or Self-Deprecator",
        in_business="Creative, culture building, facilitation, sales, entertainment",
        free_teaser="You use humor to reveal truth and cut through tension. You don't take yourself or life too seriously, bringing lightness to heavy situations and helping others find perspective through laughter.",
        detailed_characteristics="The Jester/Fool brings the sacred gift of perspective and presence. Your humor isn't mere entertainment—it's a vehicle for truth-telling, cutting through pretension and self-importance to reveal what's real. You understand that laughter creates connection and that playfulness is a form of wisdom. By not taking yourself too seriously, you're free to be authentic and to help others do the same. You remind people that joy and meaning coexist, that life can be both profound and playful.",
        blindspots="Your humor can become a weapon, using jokes to wound rather than illuminate. You may hide behind levity, using laughter to avoid genuine intimacy or serious responsibility. In shadow, you can become the cruel joker, or conversely, the self-deprecator who turns all humor inward in self-destructive ways. Your presence-focus might make planning for the future feel unnecessary, and your refusal to take things seriously might prevent you from building anything lasting.",
        interaction_patterns="Natural connection with Lovers (sharing appreciation for life's pleasure) and Explorers (who share playfulness). May frustrate Warriors (who see frivolity) and Sages (who want depth). Balances well with Kings/Queens who need reminder not to take themselves too seriously.",
    ),
    ArchetypeRef(
        id=11,
        name="Caregiver/Healer",
        male_name="The Caregiver",
        female_name="The Healer",
        core_drive="Service, compassion, nurturing",
        strengths="Empathy, generosity, creating safety, supporting growth",
        shadow="Martyr (gives until depleted) or Enabler (helps harmfully)",
        in_business="HR, customer success, healthcare, support, coaching",
        free_teaser="You prioritize others' wellbeing, sometimes at your own expense. You're drawn to help, fix, and restore, feeling most purposeful when serving and supporting others' growth and healing.",
        detailed_characteristics="The Caregiver/Healer embodies compassion and service. You possess deep empathy, feeling others' pain and joy as if they were your own. Your gift is creating safety—physical, emotional, and spiritual—where others can heal and grow. You're generous with your time, energy, and resources, finding meaning through supporting others. You understand that true care requires seeing people fully, not fixing them but witnessing and supporting their own journey toward wholeness.",
        blindspots="Your care can become martyrdom, giving so much that you deplete yourself and then resenting those you serve. You may enable others' dysfunction by helping in ways that prevent their growth. In shadow, you might need others to be broken so you can feel needed, or you might care so much for others that you neglect yourself entirely. Your empathy can become emotional enmeshment, taking on others' feelings without maintaining your own center.",
        interaction_patterns="Partners well with Lovers (sharing emotional depth) and Fathers/Mothers (both focused on nurturing). May enable Heroes to avoid their shadows or exhaust themselves caring for Rebels. Benefits from Warriors who protect your boundaries and Sages who provide perspective.",
    ),
    ArchetypeRef(
        id=12,
        name="Father/Mother",
        male_name="The Father",
        female_name="The Mother",
        core_drive="Protection, guidance, provision",
        strengths="Nurturing growth, establishing structure, wisdom, patience",
        shadow="Devouring Parent (overcontrol) or Abandoning Parent",
        in_business="Mentorship, team leadership, coaching, education",
        free_teaser="You invest heavily in developing and guiding others. You create structure that helps people grow and feel responsible for preparing them for their future, combining nurture with wisdom.",
        detailed_characteristics="The Father/Mother archetype embodies mature, generative care focused on preparing others for their own journey. Unlike the Caregiver who tends wounds, you build capacity. You provide structure, wisdom, and resources that enable others' development. Your love is expressed through investment in others' potential, combining nurture with appropriate challenge. You understand that true parenting—of children, teams, or protégés—means preparing them to leave you, to become autonomous and capable. Your legacy lives in those you've developed.",
        blindspots="Your guidance can become control, the devouring parent who prevents growth by never letting go. You may live vicariously through others' achievements, or conversely, abandon them before they're ready in the name of 'letting them learn.' In shadow, you might need others to remain dependent to feel valuable, or you might be so focused on their future that you're not present to who they are now. Your wisdom can become dogma if you're not willing to learn from those you teach.",
        interaction_patterns="Works well with Kings/Queens (both focused on long-term stability) and Sages (sharing wisdom). May overprotect Heroes from necessary challenges or clash with Rebels who resist guidance. Complements Caregivers by focusing on growth rather than healing.",
    ),
)


QUESTIONS: Tuple[QuestionRef, ...] = (
    QuestionRef(id=1, order=1, archetype_id=1, text="I naturally take charge and feel responsible for outcomes in groups"),
    QuestionRef(id=2, order=2, archetype_id=1, text="People look to me to make final decisions"),
    QuestionRef(id=3, order=3, archetype_id=1, text="I feel accountable for the success of my team/family/domain"),
    QuestionRef(id=4, order=4, archetype_id=2, text="I push through resistance and finish what I start"),
    QuestionRef(id=5, order=5, archetype_id=2, text="I set firm boundaries and enforce them"),
    QuestionRef(id=6, order=6, archetype_id=2, text="I'm energised by challenges that test my limits"),
    QuestionRef(id=7, order=7, archetype_id=3, text="I see patterns and connections others miss"),
    QuestionRef(id=8, order=8, archetype_id=3, text="I transform complex problems into elegant solutions"),
    QuestionRef(id=9, order=9, archetype_id=3, text="I'm the one people call when something 'impossible' needs solving"),
    QuestionRef(id=10, order=10, archetype_id=4, text="I engage deeply with experiences—beauty and meaning matter intensely"),
    QuestionRef(id=11, order=11, archetype_id=4, text="I form strong emotional connections with people and work"),
    QuestionRef(id=12, order=12, archetype_id=4, text="A life without passion isn't worth living"),
    QuestionRef(id=13, order=13, archetype_id=5, text="I'd rather understand something fully than act quickly"),
    QuestionRef(id=14, order=14, archetype_id=5, text="I value truth over comfort"),
    QuestionRef(id=15, order=15, archetype_id=5, text="I'm constantly seeking deeper knowledge"),
    QuestionRef(id=16, order=16, archetype_id=6, text="Routine suffocates me; I need novelty and autonomy"),
    QuestionRef(id=17, order=17, archetype_id=6, text="I'm drawn to the unknown and unexplored"),
    QuestionRef(id=18, order=18, archetype_id=6, text="I resist being tied down to one path"),
    QuestionRef(id=19, order=19, archetype_id=7, text="I'm driven to build original things—ideas, systems, products"),
    QuestionRef(id=20, order=20, archetype_id=7, text="I feel most alive when creating something new"),
    QuestionRef(id=21, order=21, archetype_id=7, text="I see possibilities where others see blank space"),
    QuestionRef(id=22, order=22, archetype_id=8, text="I prove myself through achievement and overcoming challenges"),
    QuestionRef(id=23, order=23, archetype_id=8, text="I'm energised by competition and winning"),
    QuestionRef(id=24, order=24, archetype_id=8, text="I need to know I've earned my place"),
    QuestionRef(id=25, order=25, archetype_id=9, text="I question authority and resist structures that feel arbitrary"),
    QuestionRef(id=26, order=26, archetype_id=9, text="I'd rather break the rules than follow ones that don't make sense"),
    QuestionRef(id=27, order=27, archetype_id=9, text="I see through systems others accept blindly"),
    QuestionRef(id=28, order=28, archetype_id=10, text="I use humor to cut through tension and reveal truth"),
    QuestionRef(id=29, order=29, archetype_id=10, text="I don't take myself or life too seriously"),
    QuestionRef(id=30, order=30, archetype_id=10, text="I bring lightness to heavy situations"),
    QuestionRef(id=31, order=31, archetype_id=11, text="I prioritize others' wellbeing, sometimes at my own expense"),
    QuestionRef(id=32, order=32, archetype_id=11, text="I'm drawn to help, fix, and restore"),
    QuestionRef(id=33, order=33, archetype_id=11, text="I feel most purposeful when serving others"),
    QuestionRef(id=34, order=34, archetype_id=12, text="I invest heavily in developing and guiding others"),
    QuestionRef(id=35, order=35, archetype_id=12, text="I create structure that helps people grow"),
    QuestionRef(id=36, order=36, archetype_id=12, text="I feel responsible for preparing others for their future"),
)


ARCHETYPES_BY_ID: Dict[int, ArchetypeRef] = {a.id: a for a in ARCHETYPES}
