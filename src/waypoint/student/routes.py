"""Student app route table.

Maps every deep-link path the student app understands to a screen factory.
``None`` entries exist so the link is recognised but handed to the web /
React Native fallback.

Handlers take ``(url, params, context)`` and return a ``Screen`` or ``None``.
"""

from collections.abc import Mapping
from typing import Any

from waypoint.config import RouterConfig
from waypoint.context import NavigationContext
from waypoint.dispatch import rematch
from waypoint.routing.route import Handler
from waypoint.routing.router import Router
from waypoint.routing.table import RouteTable
from waypoint.student.ids import CURRENT_USER, ContextRef, expand_tilde_id
from waypoint.student.screens import AssetType, Screen, module_item_sequence
from waypoint.url import RouteURL

NATIVE_DASHBOARD = "native_dashboard"

Params = dict[str, str]
Ctx = NavigationContext


# -- Accounts, users, calendar --


def terms_of_service(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("TermsOfService")


def act_as_user(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    if context.login_delegate is None:
        return None
    return Screen(
        "ActAsUser",
        {"login_delegate": context.login_delegate, "user_id": params.get("userID")},
    )


def calendar(url: RouteURL, params: Params, context: Ctx) -> Screen:
    event_id = url.query.get("event_id")
    if event_id is not None:
        return Screen("CalendarEventDetails", {"event_id": event_id})
    return Screen("Planner")


def calendar_event(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("CalendarEventDetails", {"event_id": params["eventID"]})


def courses(url: RouteURL, params: Params, context: Ctx) -> Screen:
    if context.feature_enabled(NATIVE_DASHBOARD):
        return Screen("CourseList")
    return Screen(
        "Helm",
        {"module_name": "/courses", "url": url, "params": params, "user_info": context.user_info},
    )


def group_navigation(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("GroupNavigation", {"context": ctx})


def activity_stream(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("ActivityStream")


# -- Announcements & discussions --


def announcement_list(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("AnnouncementList", {"context": ctx})


def _topic_editor(url: RouteURL, topic_id: str | None, is_announcement: bool) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen(
        "DiscussionEditor",
        {"context": ctx, "topic_id": topic_id, "is_announcement": is_announcement},
    )


def announcement_new(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    return _topic_editor(url, None, is_announcement=True)


def announcement_edit(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    return _topic_editor(url, params["announcementID"], is_announcement=True)


def announcement_details(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen(
        "DiscussionDetails",
        {"context": ctx, "topic_id": params["announcementID"], "is_announcement": True},
    )


def discussion_list(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("DiscussionList", {"context": ctx})


def discussion_new(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    return _topic_editor(url, None, is_announcement=False)


def discussion_edit(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    return _topic_editor(url, params["discussionID"], is_announcement=False)


def discussion_reply(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen(
        "DiscussionReply",
        {
            "context": ctx,
            "topic_id": params["discussionID"],
            "reply_to_entry_id": params.get("entryID"),
        },
    )


def discussion_details(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    discussion_id = params["discussionID"]
    if ctx.is_course and not url.origin_is_module_item_details:
        return module_item_sequence(ctx.id, AssetType.DISCUSSION, discussion_id, url)
    return Screen("DiscussionDetails", {"context": ctx, "topic_id": discussion_id})


# -- Assignments & syllabus --


def syllabus(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("SyllabusTab", {"course_id": expand_tilde_id(params["courseID"])})


def assignment_details(url: RouteURL, params: Params, context: Ctx) -> Screen:
    course_id = expand_tilde_id(params["courseID"])
    assignment_id = params["assignmentID"]
    if assignment_id == "syllabus":
        return Screen("SyllabusTab", {"course_id": course_id})
    assignment_id = expand_tilde_id(assignment_id)
    if not url.origin_is_module_item_details:
        return module_item_sequence(course_id, AssetType.ASSIGNMENT, assignment_id, url)
    return Screen(
        "AssignmentDetails",
        {"course_id": course_id, "assignment_id": assignment_id, "fragment": url.fragment},
    )


def own_submission(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen(
        "SubmissionDetails",
        {
            "context": ContextRef.course(expand_tilde_id(params["courseID"])),
            "assignment_id": expand_tilde_id(params["assignmentID"]),
            "user_id": "self",
        },
    )


def submission(url: RouteURL, params: Params, context: Ctx) -> Screen:
    course_id = expand_tilde_id(params["courseID"])
    assignment_id = expand_tilde_id(params["assignmentID"])
    if url.origin_is_calendar or url.origin_is_notification:
        return Screen(
            "AssignmentDetails",
            {"course_id": course_id, "assignment_id": assignment_id, "fragment": url.fragment},
        )
    return Screen(
        "SubmissionDetails",
        {
            "context": ContextRef.course(course_id),
            "assignment_id": assignment_id,
            "user_id": expand_tilde_id(params["userID"]),
        },
    )


# -- Conferences & external tools --


def conference_list(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("ConferenceList", {"context": ctx})


def conference_details(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("ConferenceDetails", {"context": ctx, "conference_id": params["conferenceID"]})


def conference_join(url: RouteURL, params: Params, context: Ctx) -> None:
    if context.navigator is not None:
        context.navigator.open(url)
    return None


def external_tool(url: RouteURL, params: Params, context: Ctx) -> None:
    if context.navigator is not None:
        context.navigator.present_tool(ContextRef.course(params["courseID"]), params["toolID"])
    return None


# -- Files --


def file_list(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    if "preview" in url.query:
        return file_details(url, params, context)
    return Screen(
        "FileList",
        {
            "context": ContextRef.from_path(url.path) or CURRENT_USER,
            "path": params.get("subFolder") or None,
        },
    )


def file_details(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    file_id = url.query.get("preview") or params.get("fileID")
    if not file_id:
        return None
    ctx = ContextRef.from_path(url.path)
    course_id = url.query.get("courseID")
    if course_id is not None:
        ctx = ContextRef.course(course_id)
    if not url.origin_is_module_item_details and ctx is not None and ctx.is_course:
        return module_item_sequence(ctx.id, AssetType.FILE, file_id, url)
    return Screen(
        "FileDetails",
        {"context": ctx, "file_id": file_id, "assignment_id": url.query.get("assignmentID")},
    )


def file_editor(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen(
        "FileEditor", {"context": ContextRef.from_path(url.path), "file_id": params["fileID"]}
    )


def folder_editor(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("FileEditor", {"folder_id": params["folderID"]})


# -- Grades, modules, pages, quizzes, people --


def grades(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("GradeList", {"course_id": params["courseID"]})


def modules(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen(
        "ModuleList", {"course_id": params["courseID"], "module_id": params.get("moduleID")}
    )


def module_item(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return module_item_sequence(params["courseID"], AssetType.MODULE_ITEM, params["itemID"], url)


def page_list(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("PageList", {"context": ctx, "app": "student"})


def _front_page_alias(alias: str) -> Handler:
    def front_page_alias(url: RouteURL, params: Params, context: Ctx) -> Any:
        parts = url.path.rstrip("/").split("/")
        parts[-1] = "pages/front_page"
        return rematch(context, url.with_path("/".join(parts)))

    front_page_alias.__name__ = f"{alias}_alias"
    return front_page_alias


def page_new(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("PageEditor", {"context": ctx})


def page_details(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    page_url = params["url"]
    if not url.origin_is_module_item_details and ctx.is_course:
        return module_item_sequence(ctx.id, AssetType.PAGE, page_url, url)
    return Screen("PageDetails", {"context": ctx, "page_url": page_url, "app": "student"})


def page_editor(url: RouteURL, params: Params, context: Ctx) -> Screen | None:
    ctx = ContextRef.from_path(url.path)
    if ctx is None:
        return None
    return Screen("PageEditor", {"context": ctx, "url": params["url"]})


def quiz_list(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("QuizList", {"course_id": expand_tilde_id(params["courseID"])})


def quiz_details(url: RouteURL, params: Params, context: Ctx) -> Screen:
    course_id = params["courseID"]
    quiz_id = params["quizID"]
    if not url.origin_is_module_item_details:
        return module_item_sequence(course_id, AssetType.QUIZ, quiz_id, url)
    return Screen("QuizDetails", {"course_id": course_id, "quiz_id": quiz_id})


def course_people(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("PeopleList", {"context": ContextRef.course(params["courseID"])})


def group_people(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("PeopleList", {"context": ContextRef.group(params["groupID"])})


# -- Settings, profile, support --


def experimental_features(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("ExperimentalFeatures")


def logs(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("LogEventList")


def profile(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("Profile", {"enrollment": "student"})


def profile_settings(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("ProfileSettings")


def report_problem(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("ErrorReport", {"type": "problem"})


def request_feature(url: RouteURL, params: Params, context: Ctx) -> Screen:
    return Screen("ErrorReport", {"type": "feature"})


def native_route(url: RouteURL, params: Params, context: Ctx) -> Any:
    route = params.get("route")
    if not route:
        return None
    return rematch(context, "/" + route, context.user_info)


# Order matters: the first matching pattern wins.
ROUTES: Mapping[str, Handler | None] = {
    "/accounts/:accountID/terms_of_service": terms_of_service,
    "/act-as-user": act_as_user,
    "/act-as-user/:userID": act_as_user,
    "/calendar": calendar,
    "/calendar_events/:eventID": calendar_event,
    "/:context/:contextID/calendar_events/:eventID": calendar_event,
    "/conversations": None,
    "/conversations/compose": None,
    "/conversations/:conversationID": None,
    "/course_favorites": None,
    "/courses": courses,
    "/courses/:courseID": None,
    "/courses/:courseID/tabs": None,
    "/groups/:groupID": group_navigation,
    "/groups/:groupID/tabs": group_navigation,
    "/:context/:contextID/activity_stream": activity_stream,
    "/:context/:contextID/announcements": announcement_list,
    "/:context/:contextID/announcements/new": announcement_new,
    "/:context/:contextID/announcements/:announcementID/edit": announcement_edit,
    "/:context/:contextID/announcements/:announcementID": announcement_details,
    "/courses/:courseID/assignments": None,
    "/courses/:courseID/syllabus": syllabus,
    "/courses/:courseID/assignments/:assignmentID": assignment_details,
    "/courses/:courseID/assignments/:assignmentID/submissions": own_submission,
    "/courses/:courseID/assignments/:assignmentID/submissions/:userID": submission,
    "/:context/:contextID/conferences": conference_list,
    "/:context/:contextID/conferences/:conferenceID": conference_details,
    "/:context/:contextID/conferences/:conferenceID/join": conference_join,
    "/:context/:contextID/discussions": discussion_list,
    "/:context/:contextID/discussion_topics": discussion_list,
    "/:context/:contextID/discussion_topics/new": discussion_new,
    "/:context/:contextID/discussion_topics/:discussionID/edit": discussion_edit,
    "/:context/:contextID/discussion_topics/:discussionID/reply": discussion_reply,
    "/:context/:contextID/discussion_topics/:discussionID/entries/:entryID/replies": (
        discussion_reply
    ),
    "/:context/:contextID/discussions/:discussionID": discussion_details,
    "/:context/:contextID/discussion_topics/:discussionID": discussion_details,
    "/courses/:courseID/external_tools/:toolID": external_tool,
    "/files": file_list,
    "/:context/:contextID/files": file_list,
    "/files/folder/*subFolder": file_list,
    "/:context/:contextID/files/folder/*subFolder": file_list,
    "/folders/:folderID/edit": folder_editor,
    "/files/:fileID": file_details,
    "/files/:fileID/download": file_details,
    "/files/:fileID/preview": file_details,
    "/files/:fileID/edit": file_editor,
    "/:context/:contextID/files/:fileID": file_details,
    "/:context/:contextID/files/:fileID/download": file_details,
    "/:context/:contextID/files/:fileID/preview": file_details,
    "/:context/:contextID/files/:fileID/edit": file_editor,
    "/courses/:courseID/grades": grades,
    "/courses/:courseID/modules": modules,
    "/courses/:courseID/modules/:moduleID": modules,
    "/courses/:courseID/modules/items/:itemID": module_item,
    "/courses/:courseID/modules/:moduleID/items/:itemID": module_item,
    "/courses/:courseID/module_item_redirect/:itemID": module_item,
    "/:context/:contextID/pages": page_list,
    "/:context/:contextID/wiki": _front_page_alias("wiki"),
    "/:context/:contextID/front_page": _front_page_alias("front_page"),
    "/:context/:contextID/pages/new": page_new,
    "/:context/:contextID/pages/:url": page_details,
    "/:context/:contextID/wiki/:url": page_details,
    "/:context/:contextID/pages/:url/edit": page_editor,
    "/:context/:contextID/wiki/:url/edit": page_editor,
    "/courses/:courseID/quizzes": quiz_list,
    "/courses/:courseID/quizzes/:quizID": quiz_details,
    "/courses/:courseID/users": course_people,
    "/groups/:groupID/users": group_people,
    "/courses/:courseID/users/:userID": None,
    "/groups/:groupID/users/:userID": None,
    "/courses/:courseID/user_preferences": None,
    "/dev-menu": None,
    "/dev-menu/experimental-features": experimental_features,
    "/logs": logs,
    "/profile": profile,
    "/profile/settings": profile_settings,
    "/support/problem": report_problem,
    "/support/feature": request_feature,
    "/native-route/*route": native_route,
    "/native-route-master/*route": native_route,
}


def build_table() -> RouteTable:
    table = RouteTable()
    table.update(ROUTES)
    return table


def build_router(config: RouterConfig | None = None) -> Router:
    """Compile the student route table."""
    return build_table().compile(config)
