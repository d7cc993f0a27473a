"""
스케줄러 성능 시각화

구성:
  - 벤치마크 리포트 업로드 → 트라이얼별 파싱
  - 트라이얼 비교 (makespan / security utility 막대 + 순위 표)
  - 트라이얼 간 추세 (선 그래프) + 요약 통계
  - 텍스트 리포트 / 차트 이미지 내보내기

UI 상태(선택, 색상, 현재 트라이얼)는 VisualizerState 하나로 관리하고
선택/색상은 JSON 파일 저장소에 유지.
"""
import logging

import streamlit as st

from analysis.summary import summarize_schedulers
from charts.figures import (
    image_export_config,
    makespan_bar_figure,
    trend_figure,
    utility_bar_figure,
)
from config.log import setup_logging
from config.settings import SAMPLE_REPORT_PATH, STORAGE_PATH
from report.exporter import export_text_report
from report.parser import max_trial_number, parse_report
from state.storage import JsonFileStorage
from state.store import (
    VisualizerState,
    load_state,
    register_schedulers,
    save_state,
    select_trial,
    selected_schedulers,
    set_color,
    set_scheduler_selected,
)
from view.builder import build_comparison_view, build_trend_view, comparison_dataframe
from view.formatting import fmt_metric

setup_logging()
logger = logging.getLogger(__name__)

# 페이지 설정
st.set_page_config(
    page_title="스케줄러 성능 시각화",
    page_icon="📊",
    layout="wide"
)


@st.cache_resource
def get_storage() -> JsonFileStorage:
    return JsonFileStorage(STORAGE_PATH)


@st.cache_data
def load_trials(text: str):
    """리포트 파싱 (같은 텍스트는 캐시)"""
    return parse_report(text)


def current_state() -> VisualizerState:
    if 'viz_state' not in st.session_state:
        st.session_state['viz_state'] = load_state(get_storage())
    return st.session_state['viz_state']


def update_state(new_state: VisualizerState):
    """상태 통째로 교체 + 저장"""
    st.session_state['viz_state'] = new_state
    save_state(get_storage(), new_state)


def load_report_text(text: str):
    """새 리포트 반영 (트라이얼 전체 재구성)"""
    st.session_state['report_text'] = text
    trials = load_trials(text)
    update_state(register_schedulers(current_state(), trials))
    if not trials:
        st.warning("⚠️ 인식할 수 있는 트라이얼이 없습니다. 파일 형식을 확인해주세요.")


def on_toggle(name: str):
    flag = st.session_state[f"sel_{name}"]
    update_state(set_scheduler_selected(current_state(), name, flag))


def on_color(name: str):
    update_state(set_color(current_state(), name, st.session_state[f"color_{name}"]))


def on_trial_change():
    update_state(select_trial(current_state(), st.session_state['trial_input']))


st.title("📊 스케줄러 성능 시각화")

# ========== 데이터 입력 ==========

st.sidebar.header("📂 데이터")

uploaded = st.sidebar.file_uploader(
    "리포트 업로드",
    type=["csv", "txt"],
    help="TRIAL RUN <n> - DEADLINE == <v> SECURITY UTILITY == <v> 형식의 벤치마크 결과"
)

if uploaded is not None:
    upload_id = getattr(uploaded, 'file_id', uploaded.name)
    if st.session_state.get('upload_id') != upload_id:
        st.session_state['upload_id'] = upload_id
        load_report_text(uploaded.getvalue().decode('utf-8', errors='replace'))

if st.sidebar.button("🧪 예제 데이터 불러오기", use_container_width=True):
    load_report_text(SAMPLE_REPORT_PATH.read_text(encoding='utf-8'))

report_text = st.session_state.get('report_text')

if report_text is None:
    # 초기 화면
    st.info("👈 왼쪽에서 리포트 파일을 업로드하거나 예제 데이터를 불러오세요.")
    st.markdown("""
    ### 📄 입력 형식

    ```
    TRIAL RUN 1 - DEADLINE == 120.0 SECURITY UTILITY == 0.6
    SCHEDULER,TASKS,MAKESPAN,SECURITY_UTILITY
    HEFT,20,98.42,0.61
    SHEFT,20,104.10,0.78
    ```

    - 각 행: `스케줄러,(무시),makespan,utility`
    - **Makespan**: 낮을수록 좋음
    - **Security Utility**: 높을수록 좋음
    - 순위: utility 내림차순, utility 차이가 0.01 미만이면 makespan이 작은 쪽이 앞
    """)
    st.stop()

trials = load_trials(report_text)
state = current_state()
max_trial = max_trial_number(trials)

# ========== 설정 ==========

st.sidebar.markdown("---")
st.sidebar.header("⚙️ 스케줄러 설정")
st.sidebar.caption(f"{len(selected_schedulers(state))}/{len(state.schedulers)}개 선택됨")

for name in state.schedulers:
    col_check, col_color = st.sidebar.columns([4, 1])
    with col_check:
        st.checkbox(
            name,
            value=state.selected.get(name, True),
            key=f"sel_{name}",
            on_change=on_toggle,
            args=(name,)
        )
    with col_color:
        st.color_picker(
            name,
            value=state.colors.get(name, '#000000'),
            key=f"color_{name}",
            on_change=on_color,
            args=(name,),
            label_visibility="collapsed"
        )

state = current_state()
chosen = selected_schedulers(state)

# ========== 내보내기 ==========

st.sidebar.markdown("---")
st.sidebar.download_button(
    "📝 텍스트 리포트 내보내기",
    data=export_text_report(trials, state.selected),
    file_name="scheduler_report.txt",
    mime="text/plain",
    use_container_width=True,
    disabled=not trials
)
st.sidebar.caption("📷 차트 이미지는 각 차트 오른쪽 위 카메라 버튼으로 저장")

if not trials:
    st.stop()

# ========== 트라이얼 비교 ==========

header_col1, header_col2 = st.columns([4, 2])
with header_col2:
    st.number_input(
        f"트라이얼 선택 (1 ~ {max_trial})",
        min_value=1,
        max_value=max_trial,
        value=min(max(state.selected_trial, 1), max_trial),
        step=1,
        key='trial_input',
        on_change=on_trial_change
    )

state = current_state()
trial_number = state.selected_trial

with header_col1:
    st.header(f"🏁 Trial Run {trial_number} - 성능 비교")

entries = build_comparison_view(trials, state.selected, state.colors, trial_number)

if trial_number not in trials:
    st.warning(f"트라이얼 {trial_number} 데이터가 없습니다.")
elif not entries:
    st.info("선택된 스케줄러가 이 트라이얼에 없습니다.")
else:
    trial = trials[trial_number]
    st.markdown(
        f"**Deadline:** {fmt_metric(trial.deadline)} | "
        f"**Min Security Utility:** {fmt_metric(trial.security_utility)}"
    )

    col_makespan, col_utility = st.columns(2)
    with col_makespan:
        st.subheader("⏱️ Makespan (낮을수록 좋음)")
        st.plotly_chart(
            makespan_bar_figure(entries),
            use_container_width=True,
            config=image_export_config(f"trial_{trial_number}_makespan")
        )
    with col_utility:
        st.subheader("🔒 Security Utility (높을수록 좋음)")
        st.plotly_chart(
            utility_bar_figure(entries),
            use_container_width=True,
            config=image_export_config(f"trial_{trial_number}_utility")
        )

    # 순위 표
    st.subheader("🏆 순위")
    ranking_df = comparison_dataframe(entries)
    ranking_df['Makespan'] = ranking_df['Makespan'].map(fmt_metric)
    ranking_df['Utility'] = ranking_df['Utility'].map(fmt_metric)
    st.dataframe(ranking_df, use_container_width=True, hide_index=True)

# ========== 추세 ==========

records = build_trend_view(trials, state.selected, state.colors, max_trial)

if records and chosen:
    st.header("📈 트라이얼 간 성능 추세")

    st.subheader("Makespan 추세")
    st.plotly_chart(
        trend_figure(records, chosen, state.colors, 'makespan'),
        use_container_width=True,
        config=image_export_config("makespan_trends")
    )

    st.subheader("Security Utility 추세")
    st.plotly_chart(
        trend_figure(records, chosen, state.colors, 'utility'),
        use_container_width=True,
        config=image_export_config("utility_trends")
    )

    # 요약 통계
    st.header("📋 스케줄러 요약")
    st.caption("1위 횟수, 평균 순위, 평균/표준편차/95% 신뢰구간 (트라이얼 전체)")
    summary_df = summarize_schedulers(trials, state.selected)
    st.dataframe(summary_df.round(3), use_container_width=True, hide_index=True)

st.markdown("---")
