"""LTI role vocabulary and the built-in role map configuration strings.

Role URNs follow https://www.imsglobal.org/spec/lti/v1p3/#role-vocabularies.
The three ``*_DEFAULT`` strings use the same delimited format that tenants
use for their own overrides, so they go through the same loaders.
"""

from __future__ import annotations

MEMBERSHIP = "http://purl.imsglobal.org/vocab/lis/v2/membership#"
INSTITUTION_PERSON = "http://purl.imsglobal.org/vocab/lis/v2/institution/person#"
SYSTEM_PERSON = "http://purl.imsglobal.org/vocab/lis/v2/system/person#"

ROLE_LEARNER = MEMBERSHIP + "Learner"
ROLE_INSTRUCTOR = MEMBERSHIP + "Instructor"
ROLE_TEACHING_ASSISTANT = MEMBERSHIP + "Instructor#TeachingAssistant"
ROLE_CONTENT_DEVELOPER = MEMBERSHIP + "ContentDeveloper"
ROLE_MENTOR = MEMBERSHIP + "Mentor"
ROLE_INSTITUTION_ADMIN = INSTITUTION_PERSON + "Administrator"
ROLE_SYSTEM_ADMIN = SYSTEM_PERSON + "Administrator"

# LTI 1.1 era identifiers
LEGACY_INSTITUTION_ADMIN = "urn:lti:instrole:ims/lis/Administrator"
LEGACY_SYSTEM_ADMIN = "urn:lti:sysrole:ims/lis/Administrator"

CONTEXT_ROLES = ("ContentDeveloper", "Instructor", "Learner", "Mentor", "Manager", "Member", "Officer")
INSTITUTION_ROLES = (
    "Faculty",
    "Guest",
    "None",
    "Other",
    "Staff",
    "Alumni",
    "Observer",
    "ProspectiveStudent",
)

#: Local role -> LTI roles sent at launch (18 entries).
LTI_OUTBOUND_ROLE_MAP_DEFAULT = (
    # Project sites
    f"access:Learner,{ROLE_LEARNER};"
    f"maintain:Instructor,{ROLE_INSTRUCTOR};"
    # Course sites, keep the blank in "Teaching Assistant"
    f"Student:Learner,{ROLE_LEARNER};"
    f"Learner:Learner,{ROLE_LEARNER};"
    f"Instructor:Instructor,{ROLE_INSTRUCTOR};"
    f"Teaching Assistant:TeachingAssistant,{ROLE_TEACHING_ASSISTANT};"
    f"admin:Instructor,Administrator,{ROLE_INSTRUCTOR},{ROLE_INSTITUTION_ADMIN};"
    f"Administrator:Administrator,{ROLE_INSTITUTION_ADMIN};"
    f"ContentDeveloper:ContentDeveloper,{ROLE_CONTENT_DEVELOPER};"
    f"Mentor:Mentor,{ROLE_MENTOR};"
    + "".join(f"{r}:{r},{INSTITUTION_PERSON}{r};" for r in INSTITUTION_ROLES)
)

#: LTI role -> local role candidates, most specific first (23 entries).
LTI_INBOUND_ROLE_MAP_DEFAULT = (
    f"{ROLE_LEARNER}:Learner,Student,access;"
    f"{ROLE_INSTRUCTOR}:Instructor,maintain;"
    f"{ROLE_TEACHING_ASSISTANT}:Teaching Assistant,Instructor,maintain;"
    + "".join(f"{MEMBERSHIP}{r}:{r};" for r in ("ContentDeveloper", "Mentor", "Manager", "Member", "Officer"))
    + "".join(f"{INSTITUTION_PERSON}{r}:{r};" for r in INSTITUTION_ROLES)
    + f"{INSTITUTION_PERSON}Student:Learner,Student,access;"
    f"{INSTITUTION_PERSON}Learner:Learner,Student,access;"
    f"{INSTITUTION_PERSON}Instructor:Instructor,maintain;"
    f"{INSTITUTION_PERSON}Member:Member;"
    f"{INSTITUTION_PERSON}Mentor:Mentor;"
    f"{ROLE_INSTITUTION_ADMIN}:Administrator,Instructor,maintain;"
    f"{ROLE_SYSTEM_ADMIN}:Administrator,Instructor,maintain;"
)

#: Pre-standard role tokens -> canonical URN (10 entries).
LTI_LEGACY_ROLE_MAP_DEFAULT = (
    f"Learner={ROLE_LEARNER};"
    f"Instructor={ROLE_INSTRUCTOR};"
    f"ContentDeveloper={ROLE_CONTENT_DEVELOPER};"
    f"Mentor={ROLE_MENTOR};"
    f"Administrator={ROLE_INSTITUTION_ADMIN};"
    f"urn:lti:role:ims/lis/Learner={ROLE_LEARNER};"
    f"urn:lti:role:ims/lis/Instructor={ROLE_INSTRUCTOR};"
    f"urn:lti:role:ims/lis/TeachingAssistant={ROLE_TEACHING_ASSISTANT};"
    f"{LEGACY_INSTITUTION_ADMIN}={ROLE_INSTITUTION_ADMIN};"
    f"{LEGACY_SYSTEM_ADMIN}={ROLE_SYSTEM_ADMIN};"
)
